"""YAML configuration for the command line tools."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from .cube import DEFAULT_SIZE

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class EngineConfig:
    cube_size: int = DEFAULT_SIZE
    seed: int | None = None
    log_level: str = "WARNING"


def load_config(path: str | Path) -> dict:
    """Load YAML config. Returns an empty dict for an empty file."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def engine_config_from_dict(data: dict) -> EngineConfig:
    cfg = EngineConfig()
    if "cube_size" in data:
        cfg.cube_size = int(data["cube_size"])
    if data.get("seed") is not None:
        cfg.seed = int(data["seed"])
    if "log_level" in data:
        cfg.log_level = str(data["log_level"]).upper()
        if cfg.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log_level {data['log_level']!r}; expected one of {', '.join(LOG_LEVELS)}")
    return cfg
