"""Codec interface for persisted goal documents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

from pydantic import TypeAdapter

from goals.errors import FormatError
from goals.types import AnyGoal, Goal

GOAL_ADAPTER: TypeAdapter[Goal] = TypeAdapter(AnyGoal)


@dataclass
class DecodeResult:
    """Goals recovered from a document plus the records that were skipped."""

    goals: list[Goal] = field(default_factory=list)
    total_points: int = 0
    warnings: list[FormatError] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.warnings)


class GoalCodec(ABC):
    """Serializes the goal sequence and point total; history is never written."""

    name: str = "codec"

    @abstractmethod
    def encode(self, goals: Sequence[Goal], total_points: int = 0) -> str:
        """Render goals and the running total as text."""

    @abstractmethod
    def decode(self, text: str) -> DecodeResult:
        """Parse text, skipping malformed goal records with a warning."""
