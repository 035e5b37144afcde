"""Testing support: tree assertions and in-memory revisions."""

from .dummy_origin import DummyOrigin, RevisionNotFoundError
from .dummy_revision import DEFAULT_AUTHOR, LABEL_NAME, DummyRevision, to_change
from .file_subjects import (
    FailureStrategy,
    PathSubject,
    RaisingFailureStrategy,
    RecordingFailureStrategy,
    assert_that_path,
)
from .fixtures import load_revision, load_revisions

__all__ = [
    # Tree assertions
    "assert_that_path",
    "PathSubject",
    "FailureStrategy",
    "RaisingFailureStrategy",
    "RecordingFailureStrategy",
    # Revisions
    "DummyRevision",
    "DummyOrigin",
    "RevisionNotFoundError",
    "DEFAULT_AUTHOR",
    "LABEL_NAME",
    "to_change",
    # Fixtures
    "load_revision",
    "load_revisions",
]
