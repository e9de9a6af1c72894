"""Interactive numbered menu over a goal tracker."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import typer

from core.orchestrator import RuntimeBundle
from goals.errors import FormatError, GoalIndexError, NotFoundError, StorageError, ValidationError
from goals.factory import build_goal, parse_kind, parse_points, parse_required_times
from goals.priority import parse_priority
from goals.tracker import GoalTracker, RecordResult

MENU_OPTIONS = (
    ("1", "Add Goal"),
    ("2", "Record Goal Event"),
    ("3", "Edit Goal"),
    ("4", "Delete Goal"),
    ("5", "Display Goals"),
    ("6", "Display History"),
    ("7", "Save Goals"),
    ("8", "Load Goals"),
    ("9", "Suggest a Goal"),
    ("0", "Exit"),
)


def render_goals(tracker: GoalTracker) -> None:
    """Echo goals grouped by category with 1-based positions."""
    if not len(tracker):
        typer.echo("You have no goals yet.")
        return
    typer.echo("Your Goals:")
    for group in tracker.list_goals():
        typer.echo(f"== {group.category} ==")
        for index, goal in group.entries:
            typer.echo(f"{index + 1}. {goal.describe()}")
    typer.echo(f"Total Points: {tracker.total_score()}")


def render_history(tracker: GoalTracker) -> None:
    if not tracker.history:
        typer.echo("No events recorded yet.")
        return
    typer.echo("Goal History:")
    for entry in tracker.history:
        typer.echo(str(entry))


def render_record(result: RecordResult) -> None:
    """Echo the message for one recorded event."""
    name = result.goal.name
    if result.was_complete:
        message = f"{name} is already completed!"
        if result.points_awarded:
            message += f" You earned {result.points_awarded} points."
    elif result.outcome == "completed":
        message = f"{name} is complete! You earned {result.points_awarded} points."
    elif result.outcome == "halfway":
        message = f"{name} is halfway there! You earned {result.points_awarded} points."
    else:
        message = f"{name} recorded! You earned {result.points_awarded} points."
    typer.echo(message)
    typer.echo(f"Total Points: {result.total_points}")


def prompt_until_valid(label: str, parser: Callable[[str], Any], default: str | None = None) -> Any:
    """Re-prompt until ``parser`` accepts the answer."""
    while True:
        raw = typer.prompt(label, default=default)
        try:
            return parser(raw)
        except ValidationError as exc:
            typer.echo(str(exc))


def prompt_position(tracker: GoalTracker, action: str) -> int | None:
    """Ask for a 1-based goal number and return the 0-based index."""
    render_goals(tracker)
    if not len(tracker):
        return None
    raw = typer.prompt(f"Enter the number of the goal to {action}")
    try:
        return int(raw.strip()) - 1
    except ValueError:
        typer.echo(f"'{raw}' is not a goal number.")
        return None


class GoalMenu:
    """Blocking menu loop; every error is reported and the loop continues."""

    def __init__(self, bundle: RuntimeBundle, goals_file: Path | None = None) -> None:
        self.bundle = bundle
        self.tracker = bundle.tracker
        self.goals_file = goals_file or bundle.goals_file
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_goal,
            "2": self.record_event,
            "3": self.edit_goal,
            "4": self.delete_goal,
            "5": lambda: render_goals(self.tracker),
            "6": lambda: render_history(self.tracker),
            "7": self.save,
            "8": self.load,
            "9": self.suggest,
        }
        bus = bundle.event_bus
        bus.subscribe("goal.added", lambda p: typer.echo(f"{p['goal'].name} has been added to your goals."))
        bus.subscribe("goal.recorded", lambda p: render_record(p["result"]))
        bus.subscribe("goal.edited", lambda p: typer.echo("Goal updated successfully."))
        bus.subscribe("goal.deleted", lambda p: typer.echo(f"{p['goal'].name} has been deleted from your goals."))

    def run(self) -> None:
        while True:
            typer.echo("\nMenu:")
            for key, label in MENU_OPTIONS:
                typer.echo(f"{key}. {label}")
            choice = typer.prompt("Select an option").strip()
            if choice == "0":
                typer.echo("Exiting program.")
                return
            action = self._actions.get(choice)
            if action is None:
                typer.echo("Invalid option. Please try again.")
                continue
            action()

    def add_goal(self) -> None:
        name = typer.prompt("Enter the name of the goal")
        points = prompt_until_valid("Enter the points for the goal", parse_points)
        category = typer.prompt("Enter the category for the goal", default="", show_default=False)
        priority = prompt_until_valid("Enter the priority (High/Medium/Low)", parse_priority, default="Medium")
        kind = prompt_until_valid("Goal type (1. Simple, 2. Eternal, 3. Checklist)", parse_kind)
        required_times = None
        if kind == "checklist":
            required_times = prompt_until_valid(
                "Enter the number of times this goal must be completed", parse_required_times
            )
        try:
            goal = build_goal(kind, name, points, category, priority, required_times)
        except ValidationError as exc:
            typer.echo(f"Goal not added: {exc}")
            return
        self.tracker.add_goal(goal)

    def record_event(self) -> None:
        index = prompt_position(self.tracker, "record an event for")
        if index is None:
            return
        try:
            self.tracker.record_event(index)
        except GoalIndexError as exc:
            typer.echo(str(exc))

    def edit_goal(self) -> None:
        index = prompt_position(self.tracker, "edit")
        if index is None:
            return
        if not 0 <= index < len(self.tracker):
            typer.echo(str(GoalIndexError(index, len(self.tracker))))
            return
        current = self.tracker.goals[index]
        name = typer.prompt("Enter new name for the goal", default=current.name)
        points = prompt_until_valid("Enter new points for the goal", parse_points, default=str(current.points))
        category = typer.prompt("Enter new category for the goal", default=current.category, show_default=bool(current.category))
        priority = prompt_until_valid("Enter new priority (High/Medium/Low)", parse_priority, default=current.priority)
        try:
            self.tracker.edit_goal(index, name=name, points=points, category=category, priority=priority)
        except (GoalIndexError, ValidationError) as exc:
            typer.echo(str(exc))

    def delete_goal(self) -> None:
        index = prompt_position(self.tracker, "delete")
        if index is None:
            return
        try:
            self.tracker.delete_goal(index)
        except GoalIndexError as exc:
            typer.echo(str(exc))

    def _prompt_path(self, verb: str) -> Path:
        raw = typer.prompt(f"Enter filename to {verb} goals", default=str(self.goals_file))
        return Path(raw).expanduser()

    def save(self) -> None:
        path = self._prompt_path("save")
        try:
            self.bundle.store.save(self.tracker, path)
        except StorageError as exc:
            typer.echo(f"Error saving goals: {exc}")
            return
        typer.echo(f"Goals saved to {path}.")

    def load(self) -> None:
        path = self._prompt_path("load")
        try:
            report = self.bundle.store.load(path, self.tracker)
        except NotFoundError:
            typer.echo(f"File not found: {path}")
            return
        except (FormatError, StorageError) as exc:
            typer.echo(f"Error loading goals: {exc}")
            return
        typer.echo(f"Loaded {report.loaded} goal(s) from {path}.")
        if report.skipped:
            typer.echo(f"Skipped {report.skipped} invalid record(s):")
            for warning in report.warnings:
                typer.echo(f"  {warning}")

    def suggest(self) -> None:
        picked = self.tracker.suggest_goal(self.bundle.rng)
        if picked is None:
            typer.echo("Nothing left to do. Add a new goal!")
            return
        index, goal = picked
        typer.echo(f"How about working on: {index + 1}. {goal.describe()}")
