"""CLI entrypoint for eternal-quest."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ui.cli import commands

app = typer.Typer(help="Eternal Quest goal tracker")
goals_app = typer.Typer(help="One-shot goal commands over the goal file")
config_app = typer.Typer(help="Configuration commands")


def _file_option():
    return typer.Option(None, "--file", "-f", help="Goal file (.json or delimited text)")


def _config_path(ctx: typer.Context) -> Optional[Path]:
    return (ctx.obj or {}).get("config")


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", help="YAML config file"),
) -> None:
    """Start the interactive menu when no command is given."""
    ctx.obj = {"config": config}
    if ctx.invoked_subcommand is None:
        commands.menu(config_path=config)


@app.command("menu")
def menu_cmd(ctx: typer.Context, file: Optional[Path] = _file_option()) -> None:
    """Interactive goal menu."""
    commands.menu(config_path=_config_path(ctx), goals_file=file)


@goals_app.command("list")
def goals_list_cmd(ctx: typer.Context, file: Optional[Path] = _file_option()) -> None:
    """List goals grouped by category."""
    commands.goals_list(_config_path(ctx), file)


@goals_app.command("add")
def goals_add_cmd(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Goal name"),
    points: int = typer.Option(..., min=0, help="Points awarded per event"),
    kind: str = typer.Option("simple", "--type", help="simple, eternal or checklist"),
    category: str = typer.Option("", help="Category label"),
    priority: str = typer.Option("Medium", help="High, Medium or Low"),
    required_times: Optional[int] = typer.Option(None, "--times", min=1, help="Completions for checklist goals"),
    file: Optional[Path] = _file_option(),
) -> None:
    """Add a goal."""
    commands.goals_add(
        _config_path(ctx),
        file,
        kind=kind,
        name=name,
        points=points,
        category=category,
        priority=priority,
        required_times=required_times,
    )


@goals_app.command("record")
def goals_record_cmd(
    ctx: typer.Context,
    position: int = typer.Argument(..., help="Goal number as shown by 'goals list'"),
    file: Optional[Path] = _file_option(),
) -> None:
    """Record an event for a goal."""
    commands.goals_record(_config_path(ctx), file, position)


@goals_app.command("delete")
def goals_delete_cmd(
    ctx: typer.Context,
    position: int = typer.Argument(..., help="Goal number as shown by 'goals list'"),
    file: Optional[Path] = _file_option(),
) -> None:
    """Delete a goal."""
    commands.goals_delete(_config_path(ctx), file, position)


@goals_app.command("score")
def goals_score_cmd(ctx: typer.Context, file: Optional[Path] = _file_option()) -> None:
    """Show the saved point total."""
    commands.goals_score(_config_path(ctx), file)


@config_app.command("show")
def config_show_cmd(ctx: typer.Context) -> None:
    """Show effective configuration."""
    commands.config_show(_config_path(ctx))


app.add_typer(goals_app, name="goals")
app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
