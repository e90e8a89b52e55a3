"""
Layout configuration.

Reads config/layout.yaml (or the file named by PLANLAYOUT_CONFIG) and applies
environment overrides on top. A missing file is not an error: the built-in
defaults below are used instead.

Usage:
    from planlayout.config import get_config

    config = get_config()
    config.default_duration_minutes
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from planlayout import paths

logger = logging.getLogger(__name__)

# ============================================================
# Defaults
# ============================================================

DEFAULT_DURATION_MINUTES = 30
"""Duration given to items that carry neither an end time nor a duration."""

DEFAULT_PLACING_SCALE = 100
"""Full track width handed to the renderer (percent)."""

DEFAULT_STRICT_INVARIANTS = False
"""Raise on inconsistent layouts in add_placing instead of logging a warning."""

ENV_DEFAULT_DURATION = "PLANLAYOUT_DEFAULT_DURATION"
ENV_STRICT_INVARIANTS = "PLANLAYOUT_STRICT_INVARIANTS"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class LayoutConfig:
    default_duration_minutes: int = DEFAULT_DURATION_MINUTES
    placing_scale: int = DEFAULT_PLACING_SCALE
    strict_invariants: bool = DEFAULT_STRICT_INVARIANTS
    source: str | None = None


_config: LayoutConfig | None = None


def _section(data: dict, name: str) -> dict:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"layout config section '{name}' must be a mapping")
    return section


def _positive_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


def _parse_bool(raw: str, name: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def load_config(path: str | Path | None = None) -> LayoutConfig:
    """
    Load layout configuration from YAML, then apply env overrides.

    Args:
        path: Explicit config file. Defaults to paths.config_path().

    Returns:
        LayoutConfig

    Raises:
        ValueError if a value is invalid.
        yaml.YAMLError if the file is not valid YAML.
    """
    config_path = Path(path) if path else paths.config_path()

    data: dict = {}
    source = None
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{config_path} must contain a mapping")
        source = str(config_path)
    else:
        logger.info(f"Layout config not found at {config_path}, using defaults")

    defaults = _section(data, "defaults")
    placing = _section(data, "placing")
    validation = _section(data, "validation")

    duration = _positive_int(
        defaults.get("duration_minutes", DEFAULT_DURATION_MINUTES),
        "defaults.duration_minutes",
    )
    scale = _positive_int(
        placing.get("scale", DEFAULT_PLACING_SCALE), "placing.scale"
    )
    strict = validation.get("strict_invariants", DEFAULT_STRICT_INVARIANTS)
    if not isinstance(strict, bool):
        raise ValueError(
            f"validation.strict_invariants must be a boolean, got {strict!r}"
        )

    if os.environ.get(ENV_DEFAULT_DURATION):
        raw = os.environ[ENV_DEFAULT_DURATION]
        try:
            duration = _positive_int(int(raw), ENV_DEFAULT_DURATION)
        except ValueError as e:
            raise ValueError(f"{ENV_DEFAULT_DURATION}: {e}") from e
    if os.environ.get(ENV_STRICT_INVARIANTS):
        strict = _parse_bool(os.environ[ENV_STRICT_INVARIANTS], ENV_STRICT_INVARIANTS)

    return LayoutConfig(
        default_duration_minutes=duration,
        placing_scale=scale,
        strict_invariants=strict,
        source=source,
    )


def get_config() -> LayoutConfig:
    """Cached configuration for the current process."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached configuration (tests, config reloads)."""
    global _config
    _config = None
