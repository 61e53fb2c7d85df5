"""Logging configuration.

Routes stdlib logging records through Rich so that diagnostics share
the themed stderr console with the rest of the CLI output.
"""

import logging

from rich.logging import RichHandler

from buildsweep.utils.formatting import err_console


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger for a CLI invocation.

    Replaces any handlers already attached to the root logger, so calling
    this more than once (e.g. across CliRunner invocations) does not
    duplicate output.

    Args:
        verbose: If True, log at DEBUG level; otherwise only warnings and errors.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        show_time=verbose,
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
