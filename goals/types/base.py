"""Base goal model shared by every goal variant."""

from __future__ import annotations

from abc import abstractmethod
from typing import Literal

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from goals.errors import ValidationError
from goals.priority import PriorityName, parse_priority

EventOutcome = Literal["recorded", "halfway", "completed", "already_complete"]


def validation_message(exc: pydantic.ValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    parts = []
    for error in exc.errors():
        loc = ".".join(str(item) for item in error.get("loc", ()))
        msg = str(error.get("msg", "invalid value"))
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "invalid goal"


class Goal(BaseModel):
    """Trackable objective with a reward and a type-specific completion rule."""

    model_config = ConfigDict(validate_assignment=True)

    kind: str
    name: str = Field(min_length=1)
    points: int = Field(ge=0)
    category: str = ""
    priority: PriorityName = "Medium"

    @field_validator("name", "category", mode="before")
    @classmethod
    def strip_text(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("priority", mode="before")
    @classmethod
    def normalize_priority(cls, value: object) -> str:
        return parse_priority(str(value))

    @property
    def progress(self) -> float:
        """Completion percentage; binary unless a variant says otherwise."""
        return 100.0 if self.is_complete else 0.0

    @abstractmethod
    def record_event(self) -> EventOutcome:
        """Apply one occurrence of the goal and report what happened."""

    def edit(self, name: str, points: int, category: str, priority: str) -> None:
        """Overwrite the descriptive fields, leaving completion state alone.

        All four values are validated before any of them is applied, so a
        rejected edit leaves the goal unchanged.
        """
        try:
            updated = type(self).model_validate(
                {
                    **self.model_dump(),
                    "name": name,
                    "points": points,
                    "category": category,
                    "priority": priority,
                }
            )
        except pydantic.ValidationError as exc:
            raise ValidationError(validation_message(exc)) from exc
        self.name = updated.name
        self.points = updated.points
        self.category = updated.category
        self.priority = updated.priority

    def describe(self) -> str:
        """Render a single display line for listings."""
        status = " (Completed)" if self.is_complete else f" (Progress: {self.progress:g}%)"
        category = self.category or "General"
        return f"{self.name} - {self.points} points [{category}] ({self.priority}){status}"
