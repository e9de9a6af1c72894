"""Configuration and runtime path bootstrapping."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "EQ_CONFIG"

DEFAULT_CONFIG: dict[str, Any] = {
    "paths": {
        "data_dir": "data",
        "goals_file": "data/goals.json",
    },
    "logging": {"level": "WARNING"},
    "scoring": {"award_repeat_events": False},
    "random": {"seed": None},
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def ensure_runtime_dirs(root: Path, config: dict[str, Any]) -> dict[str, Path]:
    """Ensure the data directory exists and return resolved paths."""
    paths_cfg = config.get("paths", {})
    data_dir = (root / paths_cfg.get("data_dir", "data")).resolve()
    goals_file = (root / paths_cfg.get("goals_file", "data/goals.json")).resolve()

    data_dir.mkdir(parents=True, exist_ok=True)

    return {
        "data_dir": data_dir,
        "goals_file": goals_file,
    }


def load_effective_config(root: Path, config_path: Path | None = None) -> dict[str, Any]:
    """Merge built-in defaults with the YAML config file.

    The file is ``config_path`` when given, else ``$EQ_CONFIG``, else
    ``<root>/config/default.yaml``.
    """
    if config_path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        config_path = Path(env_path) if env_path else root / "config" / "default.yaml"
    return merge_dicts(DEFAULT_CONFIG, load_yaml(config_path))
