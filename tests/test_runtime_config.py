"""Configuration loading and runtime wiring tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from core.orchestrator import Orchestrator
from core.policy_runtime import load_effective_config, load_yaml, merge_dicts


def test_merge_dicts_is_recursive() -> None:
    merged = merge_dicts({"a": {"b": 1, "c": 2}, "d": 3}, {"a": {"c": 5}, "e": 6})
    assert merged == {"a": {"b": 1, "c": 5}, "d": 3, "e": 6}


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    config = load_effective_config(tmp_path, tmp_path / "nope.yaml")
    assert config["scoring"]["award_repeat_events"] is False
    assert config["paths"]["goals_file"] == "data/goals.json"


def test_non_mapping_config_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_yaml(path)


def test_env_var_selects_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text("scoring:\n  award_repeat_events: true\n", encoding="utf-8")
    monkeypatch.setenv("EQ_CONFIG", str(path))

    config = load_effective_config(tmp_path)

    assert config["scoring"]["award_repeat_events"] is True
    assert config["logging"]["level"] == "WARNING"


def test_orchestrator_wires_tracker_from_config(tmp_path: Path) -> None:
    config_path = tmp_path / "eq.yaml"
    config_path.write_text(
        "paths:\n"
        "  data_dir: store\n"
        "  goals_file: store/mine.txt\n"
        "scoring:\n"
        "  award_repeat_events: true\n"
        "random:\n"
        "  seed: 7\n",
        encoding="utf-8",
    )

    bundle = Orchestrator(root=tmp_path, config_path=config_path).build()
    again = Orchestrator(root=tmp_path, config_path=config_path).build()

    assert (tmp_path / "store").is_dir()
    assert bundle.goals_file == (tmp_path / "store" / "mine.txt").resolve()
    assert bundle.tracker.award_repeat_events is True
    assert bundle.tracker.event_bus is bundle.event_bus
    assert bundle.rng.random() == again.rng.random()


def test_default_level_keeps_warnings_off_the_terminal(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    eq_logger = logging.getLogger("eq")
    monkeypatch.setattr(eq_logger, "handlers", [])
    monkeypatch.setattr(eq_logger, "level", eq_logger.level)

    Orchestrator(root=tmp_path, config_path=tmp_path / "none.yaml").build()

    assert eq_logger.level == logging.WARNING
    assert [type(handler) for handler in eq_logger.handlers] == [logging.NullHandler]


def test_debug_level_logs_to_stream(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    eq_logger = logging.getLogger("eq")
    monkeypatch.setattr(eq_logger, "handlers", [])
    monkeypatch.setattr(eq_logger, "level", eq_logger.level)
    config_path = tmp_path / "debug.yaml"
    config_path.write_text("logging:\n  level: debug\n", encoding="utf-8")

    Orchestrator(root=tmp_path, config_path=config_path).build()

    assert eq_logger.level == logging.DEBUG
    assert [type(handler) for handler in eq_logger.handlers] == [logging.StreamHandler]
