"""Tree check command - verify a directory's exact contents."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..testing.file_subjects import RecordingFailureStrategy, assert_that_path


def _split_pair(value: str, option: str) -> tuple[str, str]:
    name, sep, rest = value.partition("=")
    if not sep or not name:
        raise ValueError(f"{option} expects NAME=VALUE, got '{value}'")
    return name, rest


def run_tree(
    root: Path,
    *,
    files: list[str],
    contents: list[str],
    symlinks: list[str],
    absent: list[str],
    exact: bool = False,
    output_json: bool = False,
) -> int:
    """Run the requested checks on `root` and report every failure."""
    console = Console(stderr=True)

    content_checks = [_split_pair(pair, "--content") for pair in contents]
    symlink_checks = [_split_pair(pair, "--symlink") for pair in symlinks]

    recorder = RecordingFailureStrategy()
    subject = assert_that_path(root, recorder)

    subject.contains_files(*files)
    for name, text in content_checks:
        subject.contains_file(name, text)
    for link, target in symlink_checks:
        subject.contains_symlink(link, target)
    if absent:
        subject.contains_no_files(*absent)
    if exact:
        subject.contains_no_more_files()

    if output_json:
        print(json.dumps([f.to_dict() for f in recorder.failures], indent=2))
        return 1 if recorder.failures else 0

    if not recorder.failures:
        console.print(f"✓ {root}: {len(subject.whitelisted_paths)} file(s) verified", style="green")
        return 0

    table = Table(title=f"Tree check failures for {root}")
    table.add_column("Kind", style="bold red", no_wrap=True)
    table.add_column("Check")
    table.add_column("Expected")
    table.add_column("Actual")
    for failure in recorder.failures:
        table.add_row(
            type(failure).__name__,
            failure.description,
            "" if failure.expected is None else str(failure.expected),
            str(failure.actual),
        )
    console.print(table)
    console.print(f"✗ {len(recorder.failures)} check(s) failed", style="bold red")
    return 1
