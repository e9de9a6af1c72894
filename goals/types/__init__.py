"""Goal variant models."""

from typing import Annotated, Union

from pydantic import Field

from goals.types.base import EventOutcome, Goal
from goals.types.checklist import ChecklistGoal
from goals.types.eternal import EternalGoal
from goals.types.simple import SimpleGoal

AnyGoal = Annotated[Union[SimpleGoal, EternalGoal, ChecklistGoal], Field(discriminator="kind")]

__all__ = [
    "AnyGoal",
    "ChecklistGoal",
    "EternalGoal",
    "EventOutcome",
    "Goal",
    "SimpleGoal",
]
