"""One-shot goals."""

from __future__ import annotations

from typing import Literal

from goals.types.base import EventOutcome, Goal


class SimpleGoal(Goal):
    """Goal completed by a single recorded event."""

    kind: Literal["simple"] = "simple"
    is_complete: bool = False

    def record_event(self) -> EventOutcome:
        # Repeat events report completion again; the tracker decides on points.
        self.is_complete = True
        return "completed"
