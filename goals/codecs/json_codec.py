"""Tagged-object JSON goal documents."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

import pydantic

from goals.codecs.base import GOAL_ADAPTER, DecodeResult, GoalCodec
from goals.errors import FormatError
from goals.types import Goal
from goals.types.base import validation_message

logger = logging.getLogger("eq.codec.json")


class JsonGoalCodec(GoalCodec):
    """Stores ``{"total_points": N, "goals": [{"kind": ..., ...}]}``."""

    name = "json"

    def encode(self, goals: Sequence[Goal], total_points: int = 0) -> str:
        document = {
            "total_points": total_points,
            "goals": [goal.model_dump(mode="json") for goal in goals],
        }
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"

    def decode(self, text: str) -> DecodeResult:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise FormatError(f"Goal document is not valid JSON: {exc}") from exc
        if not isinstance(document, dict):
            raise FormatError("Goal document must be a JSON object.")
        records = document.get("goals", [])
        if not isinstance(records, list):
            raise FormatError("Goal document 'goals' must be a list.")

        result = DecodeResult()
        total = document.get("total_points", 0)
        if isinstance(total, int) and not isinstance(total, bool) and total >= 0:
            result.total_points = total
        else:
            logger.warning("Ignoring invalid total_points %r", total)

        for position, record in enumerate(records, start=1):
            try:
                result.goals.append(GOAL_ADAPTER.validate_python(record))
            except pydantic.ValidationError as exc:
                warning = FormatError(f"goal #{position}: {validation_message(exc)}")
                logger.warning("Skipping record: %s", warning)
                result.warnings.append(warning)
        return result
