"""
Revision and change contracts consumed by the migration pipeline.

A Revision is a single point in an origin's history. A Change is a revision
projected with the author and zoned date the destination should record.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Generic, TypeVar

from .authoring import Author


class Revision(ABC):
    """Capability set every origin revision provides."""

    @abstractmethod
    def as_string(self) -> str:
        """String identifier of the revision (hash, change number, ...)."""

    @abstractmethod
    def read_timestamp(self) -> datetime | None:
        """Timestamp of the revision, or None if it is not known yet."""

    @abstractmethod
    def label_name(self) -> str:
        """Name of the label used to record this revision in destination messages."""

    def get_context_reference(self) -> str | None:
        """Reference the user asked for (a branch or tag name), if any."""
        return None

    def associated_labels(self) -> Mapping[str, str]:
        """Labels attached to the reference itself rather than to its message."""
        return MappingProxyType({})


R = TypeVar("R", bound=Revision)


@dataclass(frozen=True)
class Change(Generic[R]):
    """A revision projected for consumption by migration logic."""

    revision: R
    author: Author
    message: str
    date_time: datetime
    labels: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def ref(self) -> str:
        return self.revision.as_string()

    @property
    def first_line_message(self) -> str:
        return self.message.split("\n", 1)[0]

    def summary(self) -> str:
        """Human-readable one-line summary."""
        return f"{self.ref} {self.author} {self.date_time.isoformat()} {self.first_line_message}"
