"""Goal tracker aggregate: goal sequence, score and session history."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from core.event_bus import EventBus
from goals.errors import GoalIndexError
from goals.history import HistoryEntry
from goals.types import Goal
from goals.types.base import EventOutcome

logger = logging.getLogger("eq.tracker")


@dataclass
class RecordResult:
    """Outcome of recording one event against a goal."""

    index: int
    goal: Goal
    outcome: EventOutcome
    points_awarded: int
    total_points: int
    was_complete: bool = False


@dataclass
class GoalGroup:
    """Goals sharing a category, with their positions in the tracker."""

    category: str
    entries: list[tuple[int, Goal]] = field(default_factory=list)


class GoalListing:
    """Restartable view of tracked goals grouped by category.

    Grouping is computed on each iteration, so the listing reflects the
    tracker at the time it is iterated.
    """

    def __init__(self, goals: list[Goal]) -> None:
        self._goals = goals

    def __iter__(self) -> Iterator[GoalGroup]:
        groups: dict[str, GoalGroup] = {}
        for index, goal in enumerate(self._goals):
            key = goal.category or "General"
            if key not in groups:
                groups[key] = GoalGroup(category=key)
            groups[key].entries.append((index, goal))
        yield from groups.values()

    def __len__(self) -> int:
        return len(self._goals)


class GoalTracker:
    """Sole owner and writer of the goal sequence.

    Indices are 0-based; callers translate user-facing positions.
    """

    def __init__(
        self,
        event_bus: EventBus | None = None,
        award_repeat_events: bool = False,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.award_repeat_events = award_repeat_events
        self.total_points = 0
        self._goals: list[Goal] = []
        self._history: list[HistoryEntry] = []

    @property
    def goals(self) -> tuple[Goal, ...]:
        return tuple(self._goals)

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._history)

    def __len__(self) -> int:
        return len(self._goals)

    def _goal_at(self, index: int) -> Goal:
        if not 0 <= index < len(self._goals):
            raise GoalIndexError(index, len(self._goals))
        return self._goals[index]

    def add_goal(self, goal: Goal) -> None:
        """Append a goal; duplicates are allowed."""
        self._goals.append(goal)
        logger.info("Added %s goal '%s'", goal.kind, goal.name)
        self.event_bus.emit("goal.added", {"index": len(self._goals) - 1, "goal": goal})

    def record_event(self, index: int) -> RecordResult:
        """Record one event on the goal at ``index`` and award its points."""
        goal = self._goal_at(index)
        was_complete = goal.is_complete
        outcome = goal.record_event()

        # Finished goals only pay out again in compatibility mode.
        awarded = 0
        if self.award_repeat_events or not was_complete:
            awarded = goal.points
            self.total_points += awarded
            self._history.append(HistoryEntry(goal_name=goal.name, points=awarded))
        else:
            logger.warning("Goal '%s' already complete; no points awarded", goal.name)

        result = RecordResult(
            index=index,
            goal=goal,
            outcome=outcome,
            points_awarded=awarded,
            total_points=self.total_points,
            was_complete=was_complete,
        )
        logger.info(
            "Recorded '%s': outcome=%s awarded=%d total=%d",
            goal.name,
            outcome,
            awarded,
            self.total_points,
        )
        self.event_bus.emit("goal.recorded", {"result": result})
        if outcome != "recorded":
            self.event_bus.emit(f"goal.{outcome}", {"result": result})
        return result

    def edit_goal(self, index: int, name: str, points: int, category: str, priority: str) -> Goal:
        """Overwrite name, points, category and priority of one goal."""
        goal = self._goal_at(index)
        goal.edit(name=name, points=points, category=category, priority=priority)
        logger.info("Edited goal %d -> '%s'", index, goal.name)
        self.event_bus.emit("goal.edited", {"index": index, "goal": goal})
        return goal

    def delete_goal(self, index: int) -> Goal:
        """Remove one goal; history entries that mention it are kept."""
        self._goal_at(index)
        goal = self._goals.pop(index)
        logger.info("Deleted goal %d '%s'", index, goal.name)
        self.event_bus.emit("goal.deleted", {"index": index, "goal": goal})
        return goal

    def list_goals(self) -> GoalListing:
        return GoalListing(self._goals)

    def total_score(self) -> int:
        return self.total_points

    def suggest_goal(self, rng: random.Random) -> tuple[int, Goal] | None:
        """Pick an unfinished goal at random, or None when all are done."""
        open_goals = [(index, goal) for index, goal in enumerate(self._goals) if not goal.is_complete]
        if not open_goals:
            return None
        return rng.choice(open_goals)

    def replace_goals(self, goals: Iterable[Goal]) -> None:
        """Swap in a new goal sequence, leaving score and history alone."""
        self._goals[:] = list(goals)
