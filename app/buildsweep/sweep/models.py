"""Sweep domain models.

This module defines the run configuration, the outcome of handling a
single matched directory, and the aggregate report of one run.
"""

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from buildsweep.core.paths import get_deletion_log_path


class SweepConfig(BaseModel):
    """Options for one sweep run.

    Attributes:
        start_dir: Root directory to walk.
        commit: If False, only report matches (dry run).
        skip_log_file: If True, never write the deletion log.
        log_path: Where the deletion log is written on a committing run.
    """

    model_config = ConfigDict(frozen=True)

    start_dir: Path
    commit: bool = False
    skip_log_file: bool = False
    log_path: Path = Field(default_factory=get_deletion_log_path)

    @property
    def writes_log(self) -> bool:
        """Whether this run writes the deletion log."""
        return self.commit and not self.skip_log_file


@dataclass(frozen=True, slots=True)
class SweepResult:
    """Result of handling a single matched directory.

    Attributes:
        path: Path of the matched directory, as produced by the walk.
        success: Whether the directory was removed (always True for dry runs).
        error: Underlying cause if removal failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False

    @property
    def deleted(self) -> bool:
        """Check if the directory was actually removed."""
        return self.success and not self.dry_run

    @property
    def failed(self) -> bool:
        """Check if removal was attempted and failed."""
        return not self.success


@dataclass(slots=True)
class SweepReport:
    """Outcome of a complete sweep run.

    Attributes:
        deleted: Paths removed, in deletion order.
        failures: (path, cause) pairs for directories that could not be removed.
        would_delete: Paths matched during a dry run.
        log_path: Deletion log that was written, or None.
    """

    deleted: list[str] = field(default_factory=list)
    failures: list[tuple[str, str]] = field(default_factory=list)
    would_delete: list[str] = field(default_factory=list)
    log_path: Path | None = None

    def add(self, result: SweepResult) -> None:
        """Record a single result in the matching bucket."""
        if result.dry_run:
            self.would_delete.append(result.path)
        elif result.success:
            self.deleted.append(result.path)
        else:
            self.failures.append((result.path, result.error or "Unknown error"))

    @property
    def matched(self) -> int:
        """Total number of deny-list directories encountered."""
        return len(self.deleted) + len(self.failures) + len(self.would_delete)
