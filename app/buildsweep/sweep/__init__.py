"""Build-artifact sweep.

This module provides the deny-list, the tree scanner, the deletion
operator, the deletion log and the engine that ties them together.
"""

from buildsweep.sweep.deletion_log import write_deletion_log
from buildsweep.sweep.denylist import ARTIFACT_DIR_NAMES, is_artifact_dir_name
from buildsweep.sweep.engine import run
from buildsweep.sweep.errors import DeletionLogError, SweepError
from buildsweep.sweep.models import SweepConfig, SweepReport, SweepResult
from buildsweep.sweep.operator import SweepOperator
from buildsweep.sweep.scanner import ArtifactScanner

__all__ = [
    "ARTIFACT_DIR_NAMES",
    "ArtifactScanner",
    "DeletionLogError",
    "SweepConfig",
    "SweepError",
    "SweepOperator",
    "SweepReport",
    "SweepResult",
    "is_artifact_dir_name",
    "run",
    "write_deletion_log",
]
