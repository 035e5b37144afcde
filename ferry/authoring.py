"""Authors and the policy that decides which author a migrated change gets."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

from .errors import InvalidArgumentError

# "Name <email>"; the email part may be empty
AUTHOR_PATTERN = re.compile(r"^(?P<name>[^<]+)<(?P<email>[^>]*)>$")


@dataclass(frozen=True)
class Author:
    """An author of a change: display name plus email."""

    name: str
    email: str

    @classmethod
    def parse(cls, author: str) -> Author:
        """Parse an author string in the form ``Name <email>``."""
        match = AUTHOR_PATTERN.match(author.strip())
        if match is None:
            raise InvalidArgumentError(
                f"Author '{author}' doesn't match the expected format 'name <mail@example.com>'"
            )
        return cls(name=match.group("name").strip(), email=match.group("email").strip())

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


@runtime_checkable
class AuthoringPolicy(Protocol):
    """Decides whether a change keeps its original author."""

    def use_author(self, email: str) -> bool: ...

    def get_default_author(self) -> Author: ...


class AuthoringMode(str, Enum):
    PASS_THRU = "pass_thru"  # keep every author
    OVERWRITE = "overwrite"  # always use the default author
    ALLOWED = "allowed"  # keep authors in the allowlist only


@dataclass(frozen=True)
class Authoring:
    """Concrete authoring policy."""

    default_author: Author
    mode: AuthoringMode = AuthoringMode.PASS_THRU
    allowlist: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.default_author is None:
            raise InvalidArgumentError("default_author is required")
        try:
            object.__setattr__(self, "mode", AuthoringMode(self.mode))
        except ValueError:
            raise InvalidArgumentError(f"Unknown authoring mode '{self.mode}'") from None
        object.__setattr__(self, "allowlist", frozenset(self.allowlist))
        if self.mode is AuthoringMode.ALLOWED and not self.allowlist:
            raise InvalidArgumentError("'allowed' authoring mode requires a non-empty allowlist")
        if self.mode is not AuthoringMode.ALLOWED and self.allowlist:
            raise InvalidArgumentError(f"An allowlist can only be used with 'allowed' mode, not '{self.mode.value}'")

    @classmethod
    def pass_thru(cls, default_author: Author) -> Authoring:
        return cls(default_author=default_author, mode=AuthoringMode.PASS_THRU)

    @classmethod
    def overwrite(cls, default_author: Author) -> Authoring:
        return cls(default_author=default_author, mode=AuthoringMode.OVERWRITE)

    @classmethod
    def allowed(cls, default_author: Author, allowlist: set[str] | frozenset[str]) -> Authoring:
        return cls(default_author=default_author, mode=AuthoringMode.ALLOWED, allowlist=frozenset(allowlist))

    def use_author(self, email: str) -> bool:
        if self.mode is AuthoringMode.PASS_THRU:
            return True
        if self.mode is AuthoringMode.OVERWRITE:
            return False
        return email in self.allowlist

    def get_default_author(self) -> Author:
        return self.default_author
