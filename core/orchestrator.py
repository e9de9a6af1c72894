"""Top-level application orchestrator."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.event_bus import EventBus
from core.policy_runtime import ensure_runtime_dirs, load_effective_config
from goals.stores.file_store import GoalFileStore
from goals.tracker import GoalTracker

logger = logging.getLogger("eq.orchestrator")


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    paths: dict[str, Path]
    event_bus: EventBus
    rng: random.Random
    tracker: GoalTracker
    store: GoalFileStore

    @property
    def goals_file(self) -> Path:
        return self.paths["goals_file"]


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None, config_path: Path | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()
        self.config_path = config_path

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root, self.config_path)
        paths = ensure_runtime_dirs(self.root, config)
        self._configure_logging(config)

        seed = config.get("random", {}).get("seed")
        # One generator per process, seeded once.
        rng = random.Random(seed)

        event_bus = EventBus()
        tracker = GoalTracker(
            event_bus=event_bus,
            award_repeat_events=bool(config.get("scoring", {}).get("award_repeat_events", False)),
        )
        logger.debug("Runtime built at %s (seed=%r)", self.root, seed)

        return RuntimeBundle(
            config=config,
            paths=paths,
            event_bus=event_bus,
            rng=rng,
            tracker=tracker,
            store=GoalFileStore(),
        )

    @staticmethod
    def _configure_logging(config: dict[str, Any]) -> None:
        level_name = str(config.get("logging", {}).get("level", "WARNING")).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.WARNING
        eq_logger = logging.getLogger("eq")
        eq_logger.setLevel(level)
        if eq_logger.handlers:
            return
        # At WARNING and above the CLI echoes problems itself; keep logging quiet.
        if level < logging.WARNING:
            handler: logging.Handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        else:
            handler = logging.NullHandler()
        eq_logger.addHandler(handler)
