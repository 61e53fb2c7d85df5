"""Exceptions raised by the sweep engine."""


class SweepError(Exception):
    """Base exception for sweep operations."""


class DeletionLogError(SweepError):
    """Raised when the deletion log file cannot be created or written."""
