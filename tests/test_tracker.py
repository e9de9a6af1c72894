"""Goal tracker aggregate tests."""

from __future__ import annotations

import random
from typing import Any

import pytest

from core.event_bus import EventBus
from goals.errors import GoalIndexError
from goals.tracker import GoalTracker
from goals.types import ChecklistGoal, EternalGoal, SimpleGoal


def test_simple_goal_scenario() -> None:
    tracker = GoalTracker()
    tracker.add_goal(SimpleGoal(name="Read scriptures", points=10))

    result = tracker.record_event(0)

    assert result.outcome == "completed"
    assert tracker.goals[0].is_complete is True
    assert tracker.total_score() == 10
    assert len(tracker.history) == 1


def test_checklist_scenario() -> None:
    tracker = GoalTracker()
    tracker.add_goal(ChecklistGoal(name="Gym", points=10, required_times=4))

    tracker.record_event(0)
    tracker.record_event(0)
    goal = tracker.goals[0]
    assert goal.is_complete is False
    assert goal.progress == 50

    tracker.record_event(0)
    tracker.record_event(0)
    assert goal.is_complete is True
    assert tracker.total_score() == 40


def test_out_of_range_record_changes_nothing() -> None:
    tracker = GoalTracker()
    tracker.add_goal(EternalGoal(name="Pray", points=5))
    tracker.record_event(0)

    for bad_index in (-1, 1, 99):
        with pytest.raises(IndexError):
            tracker.record_event(bad_index)

    assert tracker.total_score() == 5
    assert len(tracker) == 1
    assert len(tracker.history) == 1


def test_edit_and_delete_validate_bounds() -> None:
    tracker = GoalTracker()
    with pytest.raises(GoalIndexError):
        tracker.edit_goal(0, name="x", points=1, category="", priority="Low")
    with pytest.raises(GoalIndexError):
        tracker.delete_goal(0)


def test_finished_goals_do_not_pay_twice_by_default() -> None:
    tracker = GoalTracker()
    tracker.add_goal(SimpleGoal(name="Run marathon", points=100))
    tracker.add_goal(ChecklistGoal(name="Read books", points=10, required_times=1))

    tracker.record_event(0)
    repeat = tracker.record_event(0)
    tracker.record_event(1)
    repeat_checklist = tracker.record_event(1)

    assert repeat.was_complete is True
    assert repeat.points_awarded == 0
    assert repeat_checklist.outcome == "already_complete"
    assert repeat_checklist.points_awarded == 0
    assert tracker.total_score() == 110
    assert len(tracker.history) == 2


def test_repeat_awards_in_compatibility_mode() -> None:
    tracker = GoalTracker(award_repeat_events=True)
    tracker.add_goal(SimpleGoal(name="Run marathon", points=100))
    tracker.add_goal(ChecklistGoal(name="Read books", points=10, required_times=1))

    tracker.record_event(0)
    tracker.record_event(0)
    tracker.record_event(1)
    tracker.record_event(1)

    assert tracker.total_score() == 220
    assert len(tracker.history) == 4


def test_eternal_goal_pays_every_time() -> None:
    tracker = GoalTracker()
    tracker.add_goal(EternalGoal(name="Scripture study", points=7))
    for _ in range(3):
        tracker.record_event(0)
    assert tracker.total_score() == 21


def test_delete_keeps_order_and_history() -> None:
    tracker = GoalTracker()
    for name in ("First", "Second", "Third"):
        tracker.add_goal(EternalGoal(name=name, points=1))
    tracker.record_event(0)
    before = [str(entry) for entry in tracker.history]

    removed = tracker.delete_goal(0)

    assert removed.name == "First"
    assert [goal.name for goal in tracker.goals] == ["Second", "Third"]
    assert [str(entry) for entry in tracker.history] == before
    assert "Completed 'First' and earned 1 points." in before[0]


def test_edit_goal_updates_fields() -> None:
    tracker = GoalTracker()
    tracker.add_goal(SimpleGoal(name="Draft", points=1))
    goal = tracker.edit_goal(0, name="Final", points=20, category="Work", priority="High")
    assert tracker.goals[0] is goal
    assert (goal.name, goal.points, goal.category, goal.priority) == ("Final", 20, "Work", "High")


def test_list_goals_groups_by_first_seen_category() -> None:
    tracker = GoalTracker()
    tracker.add_goal(SimpleGoal(name="a", points=1, category="Work"))
    tracker.add_goal(SimpleGoal(name="b", points=1, category="Home"))
    tracker.add_goal(SimpleGoal(name="c", points=1, category="Work"))
    tracker.add_goal(SimpleGoal(name="d", points=1))

    listing = tracker.list_goals()
    groups = list(listing)

    assert [group.category for group in groups] == ["Work", "Home", "General"]
    assert [(index, goal.name) for index, goal in groups[0].entries] == [(0, "a"), (2, "c")]
    # Listing can be iterated again.
    assert [group.category for group in listing] == ["Work", "Home", "General"]


def test_history_view_is_read_only_copy() -> None:
    tracker = GoalTracker()
    tracker.add_goal(EternalGoal(name="Walk", points=2))
    tracker.record_event(0)
    snapshot = tracker.history
    tracker.record_event(0)
    assert len(snapshot) == 1
    assert len(tracker.history) == 2


def test_events_are_emitted_on_bus() -> None:
    bus = EventBus()
    seen: list[tuple[str, Any]] = []
    for name in ("goal.added", "goal.recorded", "goal.halfway", "goal.completed", "goal.deleted"):
        bus.subscribe(name, lambda payload, name=name: seen.append((name, payload)))

    tracker = GoalTracker(event_bus=bus)
    tracker.add_goal(ChecklistGoal(name="Lessons", points=3, required_times=2))
    tracker.record_event(0)
    tracker.record_event(0)
    tracker.delete_goal(0)

    assert [name for name, _ in seen] == [
        "goal.added",
        "goal.recorded",
        "goal.halfway",
        "goal.recorded",
        "goal.completed",
        "goal.deleted",
    ]


def test_suggest_goal_skips_completed_and_is_reproducible() -> None:
    tracker = GoalTracker()
    tracker.add_goal(SimpleGoal(name="Done", points=1))
    tracker.add_goal(EternalGoal(name="Open A", points=1))
    tracker.add_goal(EternalGoal(name="Open B", points=1))
    tracker.record_event(0)

    picks = [tracker.suggest_goal(random.Random(42)) for _ in range(3)]
    assert picks[0] == picks[1] == picks[2]
    assert picks[0] is not None
    assert picks[0][1].name in {"Open A", "Open B"}

    empty = GoalTracker()
    assert empty.suggest_goal(random.Random(1)) is None
