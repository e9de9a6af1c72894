"""Session history records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class HistoryEntry:
    """One rewarded event; kept for the process lifetime only."""

    goal_name: str
    points: int
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        stamp = self.timestamp.strftime("%Y-%m-%d %H:%M:%S")
        return f"{stamp}: Completed '{self.goal_name}' and earned {self.points} points."
