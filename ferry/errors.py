"""Error hierarchy shared by the revision model and the tree assertions."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class FerryError(Exception):
    """Base class for every error raised by ferry."""


class InvalidArgumentError(FerryError, ValueError):
    """A required argument was missing or malformed."""


class ConfigError(FerryError, ValueError):
    """A configuration file or revision fixture could not be loaded."""


class MissingTimestampError(FerryError, ValueError):
    """A revision without a timestamp was projected into a change."""


class DuplicateLabelKeyError(FerryError, ValueError):
    """A message declares the same label more than once."""

    def __init__(self, key: str, first: str, second: str) -> None:
        super().__init__(
            f"Label '{key}' is declared more than once in the message: '{first}' and '{second}'"
        )
        self.key = key
        self.first = first
        self.second = second


class PathAssertionError(FerryError, AssertionError):
    """
    A check on a directory tree failed.

    Subclasses AssertionError so test runners report it as a test failure
    rather than an error.
    """

    def __init__(
        self,
        subject: Path,
        description: str,
        actual: Any,
        *,
        expected: Any = None,
    ) -> None:
        self.subject = subject
        self.description = description
        self.actual = actual
        self.expected = expected
        super().__init__(self._format())

    @property
    def has_comparison(self) -> bool:
        return self.expected is not None

    def _format(self) -> str:
        if self.has_comparison:
            return (
                f"Not true that <{self.subject}> {self.description}.\n"
                f"  expected: {self.expected!r}\n"
                f"  but was:  {self.actual!r}"
            )
        return f"Not true that <{self.subject}> {self.description} <{self.actual}>"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "kind": type(self).__name__,
            "subject": str(self.subject),
            "description": self.description,
            "actual": str(self.actual),
        }
        if self.has_comparison:
            payload["expected"] = str(self.expected)
        return payload


class MissingFileError(PathAssertionError):
    pass


class UnexpectedFileError(PathAssertionError):
    pass


class ContentMismatchError(PathAssertionError):
    pass


class NotASymlinkError(PathAssertionError):
    pass


class SymlinkTargetMismatchError(PathAssertionError):
    pass
