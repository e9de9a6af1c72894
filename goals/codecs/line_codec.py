"""Pipe-delimited goal files, one goal per line."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import pydantic

from goals.codecs.base import GOAL_ADAPTER, DecodeResult, GoalCodec
from goals.errors import FormatError
from goals.types import ChecklistGoal, Goal, SimpleGoal
from goals.types.base import validation_message

logger = logging.getLogger("eq.codec.line")

DELIMITER = "|"
TOTAL_KEY = "total_points"

# kind -> (minimum field count, trailing field names after name|points|category|priority)
RECORD_LAYOUT: dict[str, tuple[int, tuple[str, ...]]] = {
    "simple": (6, ("is_complete",)),
    "eternal": (5, ()),
    "checklist": (7, ("required_times", "times_completed")),
}

_UNESCAPES = {"n": "\n", "r": "\r"}

_BOOLS = {"true": True, "false": False, "1": True, "0": False}


def escape_field(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace(DELIMITER, "\\" + DELIMITER)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def split_fields(line: str) -> list[str]:
    """Split on unescaped delimiters, undoing ``escape_field``."""
    fields: list[str] = []
    current: list[str] = []
    chars = iter(line)
    for char in chars:
        if char == "\\":
            following = next(chars, "")
            current.append(_UNESCAPES.get(following, following))
        elif char == DELIMITER:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
    fields.append("".join(current))
    return fields


class LineGoalCodec(GoalCodec):
    """Stores a ``total_points|N`` header followed by one goal record per line."""

    name = "line"

    def encode(self, goals: Sequence[Goal], total_points: int = 0) -> str:
        lines = [f"{TOTAL_KEY}{DELIMITER}{total_points}"]
        for goal in goals:
            fields = [goal.kind, goal.name, str(goal.points), goal.category, goal.priority]
            if isinstance(goal, SimpleGoal):
                fields.append("true" if goal.is_complete else "false")
            elif isinstance(goal, ChecklistGoal):
                fields.extend([str(goal.required_times), str(goal.times_completed)])
            lines.append(DELIMITER.join(escape_field(field) for field in fields))
        return "\n".join(lines) + "\n"

    def decode(self, text: str) -> DecodeResult:
        result = DecodeResult()
        # Only "\n" ends a record; other line breaks may appear inside text fields.
        for number, raw in enumerate(text.split("\n"), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            fields = split_fields(line)
            if fields[0] == TOTAL_KEY:
                result.total_points = self._header_total(fields, number)
                continue
            try:
                result.goals.append(self._decode_record(fields))
            except FormatError as exc:
                warning = FormatError(f"line {number}: {exc}")
                logger.warning("Skipping record: %s", warning)
                result.warnings.append(warning)
        return result

    @staticmethod
    def _header_total(fields: list[str], number: int) -> int:
        try:
            total = int(fields[1])
        except (IndexError, ValueError):
            total = -1
        if total < 0:
            logger.warning("Ignoring invalid total_points header on line %d", number)
            return 0
        return total

    @staticmethod
    def _decode_record(fields: list[str]) -> Goal:
        kind = fields[0].strip().lower()
        if kind not in RECORD_LAYOUT:
            raise FormatError(f"unknown goal type '{fields[0]}'")
        required, extra_names = RECORD_LAYOUT[kind]
        if len(fields) < required:
            raise FormatError(f"{kind} record needs {required} fields, found {len(fields)}")

        payload: dict[str, Any] = {
            "kind": kind,
            "name": fields[1],
            "points": fields[2],
            "category": fields[3],
            "priority": fields[4],
        }
        for name, value in zip(extra_names, fields[5:]):
            if name == "is_complete":
                flag = value.strip().lower()
                if flag not in _BOOLS:
                    raise FormatError(f"is_complete must be true or false, got '{value}'")
                payload[name] = _BOOLS[flag]
            else:
                payload[name] = value
        try:
            return GOAL_ADAPTER.validate_python(payload)
        except pydantic.ValidationError as exc:
            raise FormatError(validation_message(exc)) from exc
