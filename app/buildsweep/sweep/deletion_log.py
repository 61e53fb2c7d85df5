"""Deletion log file.

After a committing run, every removed directory is written to a plain
text file, one path per line, in deletion order. The file is replaced on
each run rather than appended to.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from buildsweep.sweep.errors import DeletionLogError

logger = logging.getLogger(__name__)


def write_deletion_log(deleted_paths: Sequence[str], log_path: Path) -> Path:
    """Write the deletion record to the log file.

    The file is created even when no directory was removed, leaving it
    empty.

    Args:
        deleted_paths: Removed directories, in deletion order.
        log_path: Destination file. Relative paths resolve against the
            working directory.

    Returns:
        The path that was written.

    Raises:
        DeletionLogError: If the file cannot be created or written.
    """
    # Names that are not valid UTF-8 come back from the walk with surrogate
    # escapes; write their original bytes.
    content = "".join(f"{path}\n" for path in deleted_paths)
    try:
        with open(log_path, "w", encoding="utf-8", errors="surrogateescape") as f:
            f.write(content)
    except (OSError, UnicodeError) as e:
        msg = f"Cannot write deletion log {log_path}: {e}"
        raise DeletionLogError(msg) from e

    logger.debug("Wrote %d path(s) to %s", len(deleted_paths), log_path)
    return log_path
