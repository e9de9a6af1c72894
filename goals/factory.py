"""Validated goal construction from raw user input."""

from __future__ import annotations

from typing import Any

import pydantic

from goals.errors import ValidationError
from goals.types import ChecklistGoal, EternalGoal, Goal, SimpleGoal
from goals.types.base import validation_message

GOAL_KINDS: dict[str, type[Goal]] = {
    "simple": SimpleGoal,
    "eternal": EternalGoal,
    "checklist": ChecklistGoal,
}

# Menu numbering used by the interactive CLI.
KIND_CHOICES = {"1": "simple", "2": "eternal", "3": "checklist"}


def parse_kind(text: str) -> str:
    """Resolve a goal kind from its name or menu number."""
    key = str(text).strip().lower()
    key = KIND_CHOICES.get(key, key)
    if key.endswith("goal"):
        key = key[: -len("goal")].strip()
    if key not in GOAL_KINDS:
        raise ValidationError(f"Unknown goal type '{text}'.")
    return key


def _parse_int(text: object, label: str, minimum: int) -> int:
    try:
        value = int(str(text).strip())
    except ValueError as exc:
        raise ValidationError(f"{label} must be a whole number, got '{text}'.") from exc
    if value < minimum:
        raise ValidationError(f"{label} must be at least {minimum}, got {value}.")
    return value


def parse_points(text: object) -> int:
    """Parse a non-negative point value."""
    return _parse_int(text, "Points", 0)


def parse_required_times(text: object) -> int:
    """Parse a positive completion target for checklist goals."""
    return _parse_int(text, "Required times", 1)


def build_goal(
    kind: str,
    name: str,
    points: int | str,
    category: str = "",
    priority: str = "Medium",
    required_times: int | str | None = None,
) -> Goal:
    """Create a goal of the given kind, raising ValidationError on bad input."""
    kind = parse_kind(kind)
    payload: dict[str, Any] = {
        "kind": kind,
        "name": name,
        "points": parse_points(points),
        "category": category,
        "priority": priority,
    }
    if kind == "checklist":
        if required_times is None:
            raise ValidationError("Checklist goals need the number of required completions.")
        payload["required_times"] = parse_required_times(required_times)
    try:
        return GOAL_KINDS[kind].model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(validation_message(exc)) from exc
