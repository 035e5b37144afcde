"""Recognition of label lines such as ``Reviewed-by: someone`` in change messages."""

from __future__ import annotations

import re

# A label name is one or more word characters or dashes.
VALID_LABEL_EXPR = r"[\w-]+"

# `Name: value`, `Name=value`, `Name : value`
LABEL_PATTERN = re.compile(rf"^({VALID_LABEL_EXPR})( *[:=] ?)(.*)")

# `http://...` looks like a label but is not one
URL_PATTERN = re.compile(rf"^{VALID_LABEL_EXPR}://.*")


class LabelFinder:
    """Decides whether a single line of text is a label and extracts its parts."""

    def __init__(self, line: str):
        self.line = line
        self._match = LABEL_PATTERN.match(line)

    def is_label(self) -> bool:
        return self._match is not None and URL_PATTERN.match(self.line) is None

    def is_label_named(self, name: str) -> bool:
        return self.is_label() and self.name == name

    @property
    def name(self) -> str:
        self._check_label()
        return self._match.group(1)

    @property
    def separator(self) -> str:
        self._check_label()
        return self._match.group(2)

    @property
    def value(self) -> str:
        self._check_label()
        return self._match.group(3)

    def _check_label(self) -> None:
        if not self.is_label():
            raise ValueError(f"Not a label: '{self.line}'")


def parse_label(line: str) -> tuple[str, str] | None:
    """Return ``(name, value)`` if `line` is a label line, else None."""
    finder = LabelFinder(line)
    if not finder.is_label():
        return None
    return finder.name, finder.value


def parse_labels(text: str) -> list[tuple[str, str]]:
    """Return every label found in `text`, one per matching line, in order."""
    result = []
    for line in text.split("\n"):
        label = parse_label(line)
        if label is not None:
            result.append(label)
    return result
