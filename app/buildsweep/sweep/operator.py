"""Artifact directory deletion operator.

Handles removal of matched directories with dry-run support. Failures
are returned as results rather than raised, so one directory that
cannot be removed never stops the sweep.
"""

import logging
import shutil
from pathlib import Path

from buildsweep.sweep.models import SweepResult

logger = logging.getLogger(__name__)


class SweepOperator:
    """Removes matched artifact directories.

    Attributes:
        _dry_run: If True, simulate deletions without modifying the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the SweepOperator.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Whether this operator only simulates deletions."""
        return self._dry_run

    def delete(self, path: str) -> SweepResult:
        """Remove a directory and everything beneath it.

        Symlinks are refused rather than removed, since the walk never
        reports them and removing one here would mean the tree changed
        under the scanner.

        Args:
            path: Directory to remove.

        Returns:
            SweepResult indicating success or failure.
        """
        if self._dry_run:
            return SweepResult(path=path, success=True, dry_run=True)

        target = Path(path)
        if target.is_symlink():
            return SweepResult(
                path=path,
                success=False,
                error=f"Refusing to delete symlink: {path}",
            )

        try:
            shutil.rmtree(path)
        except OSError as e:
            logger.debug("Failed to delete %s", path, exc_info=True)
            return SweepResult(path=path, success=False, error=str(e))

        return SweepResult(path=path, success=True)
