"""Goal priority vocabulary."""

from __future__ import annotations

from typing import Literal

from goals.errors import ValidationError

PriorityName = Literal["High", "Medium", "Low"]

PRIORITIES: tuple[str, ...] = ("High", "Medium", "Low")

_ALIASES = {
    "high": "High",
    "h": "High",
    "1": "High",
    "medium": "Medium",
    "med": "Medium",
    "m": "Medium",
    "2": "Medium",
    "low": "Low",
    "l": "Low",
    "3": "Low",
}


def parse_priority(text: str) -> str:
    """Normalize a priority name, initial or rank to its canonical name."""
    key = str(text).strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    raise ValidationError(f"Unknown priority '{text}'. Choose High, Medium or Low.")
