"""Error taxonomy for goal tracking."""

from __future__ import annotations


class GoalTrackerError(Exception):
    """Base class for goal tracker errors."""


class ValidationError(GoalTrackerError, ValueError):
    """Rejected user input such as negative points or an unknown priority."""


class GoalIndexError(GoalTrackerError, IndexError):
    """Goal position outside the tracked sequence."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Invalid goal index {index + 1}; {size} goal(s) tracked.")
        self.index = index
        self.size = size


class NotFoundError(GoalTrackerError, FileNotFoundError):
    """Load target does not exist."""


class FormatError(GoalTrackerError, ValueError):
    """Malformed persisted record or document."""


class StorageError(GoalTrackerError, OSError):
    """Persisted file could not be read or written."""
