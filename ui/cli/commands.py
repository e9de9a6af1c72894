"""Typer command handlers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from core.orchestrator import Orchestrator, RuntimeBundle
from goals.errors import FormatError, GoalIndexError, NotFoundError, StorageError, ValidationError
from goals.factory import build_goal
from ui.cli.menu import GoalMenu, render_goals, render_record

logger = logging.getLogger("eq.cli")


def _runtime(config_path: Path | None = None) -> RuntimeBundle:
    bundle = Orchestrator(root=Path.cwd(), config_path=config_path).build()
    return bundle


def _fail(message: str) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _load_goals(bundle: RuntimeBundle, goals_file: Path, for_update: bool = False) -> None:
    """Load ``goals_file`` into the bundle's tracker; a missing file means no goals.

    With ``for_update`` any skipped record aborts the command, since saving
    the decoded subset would drop those records from the file.
    """
    try:
        report = bundle.store.load(goals_file, bundle.tracker)
    except NotFoundError:
        logger.info("No goal file at %s; starting empty", goals_file)
        return
    except (FormatError, StorageError) as exc:
        _fail(f"Error loading goals: {exc}")
        return
    for warning in report.warnings:
        typer.echo(f"Skipped invalid record: {warning}", err=True)
    if for_update and report.skipped:
        _fail(
            f"Refusing to rewrite {goals_file}: {report.skipped} record(s) could not be read. "
            "Fix or remove them first."
        )


def _save_goals(bundle: RuntimeBundle, goals_file: Path) -> None:
    try:
        bundle.store.save(bundle.tracker, goals_file)
    except StorageError as exc:
        _fail(f"Error saving goals: {exc}")


def menu(config_path: Path | None = None, goals_file: Path | None = None) -> None:
    """Run the interactive menu loop."""
    bundle = _runtime(config_path)
    GoalMenu(bundle, goals_file=goals_file).run()


def goals_list(config_path: Path | None, goals_file: Path | None) -> None:
    """Print goals grouped by category."""
    bundle = _runtime(config_path)
    path = goals_file or bundle.goals_file
    _load_goals(bundle, path)
    render_goals(bundle.tracker)


def goals_add(
    config_path: Path | None,
    goals_file: Path | None,
    *,
    kind: str,
    name: str,
    points: int,
    category: str,
    priority: str,
    required_times: int | None,
) -> None:
    """Add one goal to the goal file."""
    bundle = _runtime(config_path)
    path = goals_file or bundle.goals_file
    _load_goals(bundle, path, for_update=True)
    try:
        goal = build_goal(kind, name, points, category, priority, required_times)
    except ValidationError as exc:
        _fail(f"Goal not added: {exc}")
        return
    bundle.tracker.add_goal(goal)
    _save_goals(bundle, path)
    typer.echo(f"Added goal {len(bundle.tracker)}: {goal.describe()}")


def goals_record(config_path: Path | None, goals_file: Path | None, position: int) -> None:
    """Record one event against the goal at a 1-based position."""
    bundle = _runtime(config_path)
    path = goals_file or bundle.goals_file
    _load_goals(bundle, path, for_update=True)
    try:
        result = bundle.tracker.record_event(position - 1)
    except GoalIndexError as exc:
        _fail(str(exc))
        return
    _save_goals(bundle, path)
    render_record(result)


def goals_delete(config_path: Path | None, goals_file: Path | None, position: int) -> None:
    """Delete the goal at a 1-based position."""
    bundle = _runtime(config_path)
    path = goals_file or bundle.goals_file
    _load_goals(bundle, path, for_update=True)
    try:
        goal = bundle.tracker.delete_goal(position - 1)
    except GoalIndexError as exc:
        _fail(str(exc))
        return
    _save_goals(bundle, path)
    typer.echo(f"{goal.name} has been deleted from your goals.")


def goals_score(config_path: Path | None, goals_file: Path | None) -> None:
    bundle = _runtime(config_path)
    _load_goals(bundle, goals_file or bundle.goals_file)
    typer.echo(f"Total Points: {bundle.tracker.total_score()}")


def config_show(config_path: Path | None = None) -> None:
    """Show effective runtime config."""
    bundle = _runtime(config_path)
    payload = {
        "config": bundle.config,
        "paths": {key: str(value) for key, value in bundle.paths.items()},
    }
    typer.echo(json.dumps(payload, indent=2))
