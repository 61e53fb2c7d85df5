"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape

from buildsweep.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def printable(text: str) -> str:
    """Make text containing surrogate-escaped filename bytes safe to print.

    Undecodable bytes are shown as U+FFFD.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def format_path(path: str) -> str:
    """Format a filesystem path for Rich output.

    Paths may contain square brackets, which Rich would otherwise
    read as markup, and bytes that are not valid UTF-8.

    Args:
        path: Path to display.

    Returns:
        Escaped path wrapped in the path style.
    """
    return f"[path]{escape(printable(path))}[/]"


def print_would_delete(path: str) -> None:
    """Print the dry-run notice for a matched directory."""
    console.print(f"[pending]Would delete[/] {format_path(path)}", soft_wrap=True)


def print_deleting(path: str) -> None:
    """Print the notice for a directory being removed."""
    console.print(f"[removed]Deleting[/] {format_path(path)}", soft_wrap=True)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}", soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]", soft_wrap=True)
