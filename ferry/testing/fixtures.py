"""
Revision fixtures stored as markdown files.

The frontmatter describes the revision and the body is its message:

    ---
    reference: abc123
    author: Jane Doe <jane@example.com>
    timestamp: 2024-01-02T03:04:05Z
    context_reference: main
    labels:
      GITHUB_PR_NUMBER: "12"
    ---
    Fix the frobnicator

    Reviewed-by: someone
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from ..authoring import Author
from ..errors import ConfigError, FerryError
from .dummy_revision import DEFAULT_AUTHOR, DummyRevision


def _parse_timestamp(value: Any) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            pass
    raise ConfigError(f"Invalid timestamp '{value}'")


def revision_from_post(post: frontmatter.Post) -> DummyRevision:
    """Build a DummyRevision from a parsed frontmatter post."""
    fm = post.metadata

    reference = fm.get("reference")
    if reference is None or str(reference).strip() == "":
        raise ConfigError("Revision fixture requires a 'reference'")

    labels = fm.get("labels") or {}
    if not isinstance(labels, dict):
        raise ConfigError("'labels' must be a mapping")

    matches_glob = fm.get("matches_glob", True)
    if not isinstance(matches_glob, bool):
        raise ConfigError(f"'matches_glob' must be true or false, got '{matches_glob}'")

    context_reference = fm.get("context_reference")
    kwargs = {}
    if fm.get("changes_base"):
        kwargs["changes_base"] = Path(fm["changes_base"])

    try:
        author_raw = fm.get("author")
        author = Author.parse(str(author_raw)) if author_raw else DEFAULT_AUTHOR
        return DummyRevision(
            reference=str(reference),
            message=post.content,
            author=author,
            timestamp=_parse_timestamp(fm.get("timestamp")),
            context_reference=str(context_reference) if context_reference is not None else None,
            reference_labels={str(k): str(v) for k, v in labels.items()},
            matches_glob=matches_glob,
            **kwargs,
        )
    except ConfigError:
        raise
    except FerryError as e:
        raise ConfigError(f"Invalid revision fixture: {e}") from e


def load_revision(path: Path) -> DummyRevision:
    """Load a DummyRevision from a markdown fixture file."""
    try:
        post = frontmatter.load(path)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid frontmatter in {path}: {e}") from e
    try:
        return revision_from_post(post)
    except ConfigError as e:
        raise ConfigError(f"{path}: {e}") from e


def load_revisions(directory: Path) -> list[DummyRevision]:
    """Load every ``*.md`` fixture in `directory`, sorted by file name."""
    return [load_revision(p) for p in sorted(directory.glob("*.md"))]
