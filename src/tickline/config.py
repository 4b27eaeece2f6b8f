"""Configuration loading and management."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from tickline.errors import ConfigurationError

# Config directory names
PROJECT_DIR = ".tickline"
USER_DIR_NAME = ".tickline"
CONFIG_FILE = "config.yaml"


@dataclass(slots=True)
class ChartConfig:
    """Merged chart configuration from all sources.

    Priority: overrides > env vars > explicit file > project config > user config > defaults

    Sizes are in the caller's units (terminal cells for the bundled widgets).
    """
    # Layout
    font_size: float = 3.0
    padding_top: float = 0.0
    padding_bottom: float = 0.0
    padding_left: float = 0.0
    padding_right: float = 0.0

    # Label search
    max_evaluations: int = 250_000
    max_precision_digits: int = 15

    # Features
    debug: bool = False

    def validate(self) -> None:
        if self.font_size <= 0:
            raise ConfigurationError(f"font_size must be positive, got {self.font_size}", key="font_size")
        for name in ("padding_top", "padding_bottom", "padding_left", "padding_right"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must not be negative", key=name)
        if self.max_evaluations < 1:
            raise ConfigurationError("max_evaluations must be at least 1", key="max_evaluations")
        if not 0 <= self.max_precision_digits <= 17:
            raise ConfigurationError(
                "max_precision_digits must be between 0 and 17", key="max_precision_digits"
            )


def find_project_root(start: Path | None = None) -> Path | None:
    """Find the project root by looking for .tickline/ or .git/."""
    current = start or Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / PROJECT_DIR).exists():
            return parent
        if (parent / ".git").exists():
            return parent
    return None


def get_user_config_dir() -> Path:
    """Get the user-level config directory (~/.tickline/)."""
    return Path.home() / USER_DIR_NAME


def load_yaml_config(path: Path) -> dict[str, Any]:
    """Load a YAML config file, returning empty dict if not found."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (yaml.YAMLError, OSError):
        return {}


def load_config(
    path: Path | str | None = None,
    *,
    overrides: dict[str, Any] | None = None,
    working_dir: Path | None = None,
) -> ChartConfig:
    """Load configuration from all sources with proper priority."""
    config = ChartConfig()

    # 1. User-level config (~/.tickline/config.yaml)
    _apply_dict(config, load_yaml_config(get_user_config_dir() / CONFIG_FILE))

    # 2. Project-level config (.tickline/config.yaml)
    project_root = find_project_root(working_dir)
    if project_root:
        _apply_dict(config, load_yaml_config(project_root / PROJECT_DIR / CONFIG_FILE))

    # 3. Explicit file
    if path is not None:
        _apply_dict(config, load_yaml_config(Path(path)))

    # 4. Environment variables
    if debug := os.environ.get("TICKLINE_DEBUG"):
        config.debug = debug.lower() in ("1", "true", "yes")
    if budget := os.environ.get("TICKLINE_MAX_EVALUATIONS"):
        _apply_dict(config, {"max_evaluations": budget})

    # 5. Explicit overrides (highest priority)
    _apply_dict(config, overrides or {})

    config.validate()
    return config


def _apply_dict(config: ChartConfig, data: dict[str, Any]) -> None:
    """Apply dictionary values to config, only for known fields."""
    aliases = {
        "fontSize": "font_size",
        "maxEvaluations": "max_evaluations",
    }
    known = {f.name: f.type for f in fields(ChartConfig)}
    for key, value in data.items():
        attr = aliases.get(key, key)
        if attr not in known or value is None:
            continue
        setattr(config, attr, _coerce(attr, known[attr], value))


def _coerce(name: str, type_name: Any, value: Any) -> Any:
    try:
        if type_name == "bool":
            if isinstance(value, str):
                return value.lower() in ("1", "true", "yes")
            return bool(value)
        if type_name == "int":
            return int(value)
        if type_name == "float":
            return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid value for {name}: {value!r}", key=name) from exc
    return value
