"""Sweep engine.

Runs one pass over a source tree: walk, match, report or delete, and
finally write the deletion log when requested.
"""

import logging
from collections.abc import Callable, Collection

from buildsweep.sweep.deletion_log import write_deletion_log
from buildsweep.sweep.denylist import ARTIFACT_DIR_NAMES
from buildsweep.sweep.models import SweepConfig, SweepReport, SweepResult
from buildsweep.sweep.operator import SweepOperator
from buildsweep.sweep.scanner import ArtifactScanner

logger = logging.getLogger(__name__)

ResultCallback = Callable[[SweepResult], None]


def run(
    config: SweepConfig,
    on_match: Callable[[str], None] | None = None,
    on_result: ResultCallback | None = None,
    *,
    deny_list: Collection[str] = ARTIFACT_DIR_NAMES,
) -> SweepReport:
    """Sweep a directory tree for build-artifact directories.

    Each matched directory is handed to the operator before the walk
    moves on. Per-directory failures are collected in the report and do
    not stop the walk.

    Args:
        config: Run options.
        on_match: Called with each matched path before it is handled.
        on_result: Called with each result as soon as it is produced.
        deny_list: Directory base names to match.

    Returns:
        SweepReport describing what was matched, removed and failed.

    Raises:
        DeletionLogError: If the deletion log was requested and cannot be written.
    """
    scanner = ArtifactScanner(config.start_dir, deny_list=deny_list)
    operator = SweepOperator(dry_run=not config.commit)
    report = SweepReport()

    for path in scanner.scan():
        if on_match is not None:
            on_match(path)
        result = operator.delete(path)
        if result.failed:
            logger.debug("Could not delete %s: %s", path, result.error)
        report.add(result)
        if on_result is not None:
            on_result(result)

    if config.writes_log:
        report.log_path = write_deletion_log(report.deleted, config.log_path)

    logger.debug(
        "Sweep of %s finished: %d matched, %d deleted, %d failed",
        config.start_dir,
        report.matched,
        len(report.deleted),
        len(report.failures),
    )
    return report
