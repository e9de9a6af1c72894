"""Goals that are never finished."""

from __future__ import annotations

from typing import Literal

from goals.types.base import EventOutcome, Goal


class EternalGoal(Goal):
    """Goal rewarded on every event and never complete."""

    kind: Literal["eternal"] = "eternal"

    @property
    def is_complete(self) -> bool:
        return False

    def record_event(self) -> EventOutcome:
        return "recorded"
