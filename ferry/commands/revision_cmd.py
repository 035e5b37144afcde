"""Revision command - show how a revision fixture projects into a change."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..authoring import Authoring
from ..config import load_authoring
from ..errors import FerryError
from ..testing.dummy_revision import DEFAULT_AUTHOR
from ..testing.fixtures import load_revision


def run_revision(
    fixture: Path,
    *,
    authoring_path: Path | None = None,
    output_json: bool = False,
) -> int:
    """Load `fixture`, project it with the configured authoring and print the change."""
    console = Console(stderr=True)

    try:
        authoring = load_authoring(authoring_path) if authoring_path else Authoring.pass_thru(DEFAULT_AUTHOR)
        revision = load_revision(fixture)
        change = revision.to_change(authoring)
    except FerryError as e:
        console.print(f"✗ {e}", style="bold red")
        return 1

    if output_json:
        print(
            json.dumps(
                {
                    "ref": change.ref,
                    "label_name": revision.label_name(),
                    "author": str(change.author),
                    "date_time": change.date_time.isoformat(),
                    "message": change.message,
                    "labels": dict(change.labels),
                    "context_reference": revision.get_context_reference(),
                    "associated_labels": dict(revision.associated_labels()),
                },
                indent=2,
            )
        )
        return 0

    table = Table(title=f"{revision.label_name()}: {change.ref}", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Author", str(change.author))
    table.add_row("Date", change.date_time.isoformat())
    table.add_row("Summary", change.first_line_message)
    if revision.get_context_reference():
        table.add_row("Context", revision.get_context_reference())
    for name, value in change.labels.items():
        table.add_row(f"Label {name}", value)
    for name, value in revision.associated_labels().items():
        table.add_row(f"Ref label {name}", value)
    console.print(table)
    return 0
