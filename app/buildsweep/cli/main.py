"""Main CLI application entry point.

Defines the Typer application: a single command that sweeps a directory
tree for build-artifact directories.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from buildsweep import __version__
from buildsweep.sweep.denylist import ARTIFACT_DIR_NAMES
from buildsweep.sweep.engine import run
from buildsweep.sweep.errors import DeletionLogError
from buildsweep.sweep.models import SweepConfig, SweepReport, SweepResult
from buildsweep.utils.formatting import (
    format_path,
    print_deleting,
    print_error,
    print_info,
    print_success,
    print_warning,
    print_would_delete,
    printable,
)
from buildsweep.utils.log import setup_logging

app = typer.Typer(
    name="buildsweep",
    help="Remove build-artifact directories ("
    + ", ".join(sorted(ARTIFACT_DIR_NAMES))
    + ") from a source tree.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"buildsweep version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    start_dir: Annotated[
        Path,
        typer.Argument(help="Starting directory for the search."),
    ],
    commit: Annotated[
        bool,
        typer.Option("--commit", "-c", help="Actually delete the matched directories."),
    ] = False,
    skip_log_file: Annotated[
        bool,
        typer.Option(
            "--skip-log-file",
            "-s",
            help="Don't create a log file with all the deleted directories.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Find and delete build-artifact directories under START_DIR.

    Without --commit this is a dry run that only lists what would be
    deleted. A committing run writes the removed paths to
    deleted_dirs_log.txt in the current directory unless --skip-log-file
    is given.
    """
    setup_logging(verbose)

    config = SweepConfig(start_dir=start_dir, commit=commit, skip_log_file=skip_log_file)
    notice = print_deleting if commit else print_would_delete

    try:
        report = run(config, on_match=notice, on_result=_print_failure)
    except DeletionLogError as e:
        print_error(escape(printable(str(e))))
        raise typer.Exit(code=1) from e

    _print_summary(report, commit)


# === Private helper functions ===


def _print_failure(result: SweepResult) -> None:
    """Report a directory that could not be removed."""
    if result.failed:
        print_error(
            f"Could not delete directory {format_path(result.path)}: "
            f"{escape(printable(result.error or 'Unknown error'))}"
        )


def _print_summary(report: SweepReport, commit: bool) -> None:
    """Display the outcome of the sweep."""
    if report.matched == 0:
        print_success("Nothing to clean. No build-artifact directories found.")
        return

    if not commit:
        print_info(
            f"Dry-run: {_count(len(report.would_delete))} would be deleted. "
            "Re-run with --commit to delete them."
        )
        return

    if report.failures:
        print_warning(f"{len(report.deleted)} deleted, {len(report.failures)} failed")
    else:
        print_success(f"Deleted {_count(len(report.deleted))}.")

    if report.log_path is not None:
        print_info(f"Deleted paths logged to {format_path(str(report.log_path))}")


def _count(n: int) -> str:
    """Format a directory count."""
    return f"{n} directory" if n == 1 else f"{n} directories"


if __name__ == "__main__":
    app()
