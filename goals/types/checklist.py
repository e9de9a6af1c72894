"""Goals that need a fixed number of completions."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator

from goals.types.base import EventOutcome, Goal


class ChecklistGoal(Goal):
    """Goal finished after ``required_times`` recorded events."""

    kind: Literal["checklist"] = "checklist"
    required_times: int = Field(ge=1)
    times_completed: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_counter(self) -> ChecklistGoal:
        if self.times_completed > self.required_times:
            raise ValueError(
                f"times_completed ({self.times_completed}) exceeds "
                f"required_times ({self.required_times})"
            )
        return self

    @property
    def is_complete(self) -> bool:
        return self.times_completed == self.required_times

    @property
    def progress(self) -> float:
        return self.times_completed / self.required_times * 100

    def record_event(self) -> EventOutcome:
        if self.is_complete:
            return "already_complete"
        self.times_completed += 1
        if self.is_complete:
            return "completed"
        if self.times_completed == self.required_times // 2:
            return "halfway"
        return "recorded"

    def progress_bar(self, width: int = 10) -> str:
        """Render ``[####------]`` with floor(progress * width / 100) filled cells."""
        filled = self.times_completed * width // self.required_times
        return "[" + "#" * filled + "-" * (width - filled) + "]"

    def describe(self) -> str:
        return (
            f"{super().describe()} Completed {self.times_completed}/"
            f"{self.required_times} times {self.progress_bar()}"
        )
