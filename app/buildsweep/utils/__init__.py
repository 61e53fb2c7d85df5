"""Utility modules for buildsweep.

This module exports commonly used utility functions.
"""

from buildsweep.utils.formatting import (
    console,
    err_console,
    format_path,
    printable,
    print_deleting,
    print_error,
    print_info,
    print_success,
    print_warning,
    print_would_delete,
)
from buildsweep.utils.log import setup_logging

__all__ = [
    "console",
    "err_console",
    "format_path",
    "printable",
    "print_deleting",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "print_would_delete",
    "setup_logging",
]
