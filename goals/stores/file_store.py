"""File-backed goal persistence."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from goals.codecs.base import GoalCodec
from goals.codecs.json_codec import JsonGoalCodec
from goals.codecs.line_codec import LineGoalCodec
from goals.errors import FormatError, NotFoundError, StorageError
from goals.tracker import GoalTracker

logger = logging.getLogger("eq.store")


def codec_for_path(path: Path) -> GoalCodec:
    """JSON for ``.json`` files, delimited lines for everything else."""
    if path.suffix.lower() == ".json":
        return JsonGoalCodec()
    return LineGoalCodec()


@dataclass
class LoadReport:
    """Summary of one load."""

    tracker: GoalTracker
    path: Path
    loaded: int = 0
    warnings: list[FormatError] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.warnings)


class GoalFileStore:
    """Saves and loads a tracker's goals and score; history is not persisted."""

    def __init__(self, codec: GoalCodec | None = None) -> None:
        self.codec = codec

    def _codec(self, path: Path) -> GoalCodec:
        return self.codec or codec_for_path(path)

    def save(self, tracker: GoalTracker, path: Path) -> Path:
        """Write the tracker to ``path``, creating parent directories."""
        path = Path(path)
        text = self._codec(path).encode(tracker.goals, total_points=tracker.total_points)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Could not save goals to {path}: {exc}") from exc
        logger.info("Saved %d goal(s) to %s", len(tracker), path)
        return path

    def load(self, path: Path, tracker: GoalTracker | None = None) -> LoadReport:
        """Read goals from ``path`` into ``tracker`` (a new one when omitted).

        Malformed records are skipped and reported; the rest are loaded.
        """
        path = Path(path)
        if not path.exists():
            raise NotFoundError(f"Goal file not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Could not read goals from {path}: {exc}") from exc

        decoded = self._codec(path).decode(text)
        tracker = tracker if tracker is not None else GoalTracker()
        tracker.replace_goals(decoded.goals)
        tracker.total_points = decoded.total_points
        if decoded.skipped:
            logger.warning("Skipped %d malformed record(s) in %s", decoded.skipped, path)
        logger.info("Loaded %d goal(s) from %s", len(decoded.goals), path)
        return LoadReport(
            tracker=tracker,
            path=path,
            loaded=len(decoded.goals),
            warnings=list(decoded.warnings),
        )
