"""CLI entrypoint for ferry testing tools."""

import logging
import sys
from pathlib import Path

import click
from rich.logging import RichHandler

from . import __version__


@click.group()
@click.version_option(__version__, prog_name="ferry-testing")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    show_default=True,
    help="Logging verbosity",
)
def cli(log_level: str) -> None:
    """ferry-testing - Inspect migration test trees and revision fixtures."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


@cli.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path))
@click.option("--file", "files", multiple=True, metavar="NAME", help="File that must exist. Repeatable.")
@click.option(
    "--content",
    "contents",
    multiple=True,
    metavar="NAME=TEXT",
    help="File that must exist with exactly TEXT as content. Repeatable.",
)
@click.option(
    "--symlink",
    "symlinks",
    multiple=True,
    metavar="LINK=TARGET",
    help="Symlink that must point to TARGET. Repeatable.",
)
@click.option("--absent", multiple=True, metavar="NAME", help="File that must not exist. Repeatable.")
@click.option("--exact", is_flag=True, help="Fail if any other regular file exists under ROOT")
@click.option("--json", "output_json", is_flag=True, help="Output failures as JSON")
def tree(
    root: Path,
    files: tuple[str, ...],
    contents: tuple[str, ...],
    symlinks: tuple[str, ...],
    absent: tuple[str, ...],
    exact: bool,
    output_json: bool,
) -> None:
    """Verify the contents of a directory tree.

    Examples:

        ferry-testing tree out --file README.md --content VERSION=1.0 --exact

        ferry-testing tree out --symlink latest=v2/bin --absent tmp.txt
    """
    from .commands.tree_cmd import run_tree

    try:
        exit_code = run_tree(
            root,
            files=list(files),
            contents=list(contents),
            symlinks=list(symlinks),
            absent=list(absent),
            exact=exact,
            output_json=output_json,
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    sys.exit(exit_code)


@cli.command()
@click.argument("fixture", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--authoring",
    "authoring_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with an [authoring] table (default: keep every author)",
)
@click.option("--json", "output_json", is_flag=True, help="Output the change as JSON")
def revision(fixture: Path, authoring_path: Path | None, output_json: bool) -> None:
    """Show the change a revision fixture projects into.

    Examples:

        ferry-testing revision tests/fixtures/rev.md --authoring ferry.toml
    """
    from .commands.revision_cmd import run_revision

    sys.exit(run_revision(fixture, authoring_path=authoring_path, output_json=output_json))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
