"""Load and merge configuration from .inlinediff.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from inlinediff.config.schema import (
    BACKGROUNDS,
    COLOR_MODES,
    DisplayConfig,
    InlineDiffConfig,
)

CONFIG_FILENAME = ".inlinediff.toml"

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _parse_int(val: str) -> Optional[int]:
    try:
        return int(val)
    except ValueError:
        return None


def _merge_env_overrides(cfg: InlineDiffConfig) -> None:
    """Apply INLINEDIFF_* environment variable overrides; bad values are ignored."""
    display = cfg.display
    if val := os.environ.get("INLINEDIFF_COLOR"):
        if val in COLOR_MODES:
            display.color = val  # type: ignore[assignment]
    if val := os.environ.get("INLINEDIFF_BACKGROUND"):
        if val in BACKGROUNDS:
            display.background = val  # type: ignore[assignment]
    if val := os.environ.get("INLINEDIFF_SYNTAX_HIGHLIGHT"):
        if val.lower() in _TRUE:
            display.syntax_highlight = True
        elif val.lower() in _FALSE:
            display.syntax_highlight = False
    if val := os.environ.get("INLINEDIFF_TAB_WIDTH"):
        width = _parse_int(val)
        if width is not None and width >= 1:
            display.tab_width = width
    if val := os.environ.get("INLINEDIFF_CONTEXT"):
        context = _parse_int(val)
        if context is not None and context >= 0:
            display.context = context


def validate(cfg: InlineDiffConfig) -> None:
    """Raise ConfigError if any value is out of range."""
    display = cfg.display
    if display.color not in COLOR_MODES:
        raise ConfigError(f"display.color must be one of {', '.join(COLOR_MODES)}, got {display.color!r}")
    if display.background not in BACKGROUNDS:
        raise ConfigError(
            f"display.background must be one of {', '.join(BACKGROUNDS)}, got {display.background!r}"
        )
    if not isinstance(display.syntax_highlight, bool):
        raise ConfigError("display.syntax_highlight must be true or false")
    if isinstance(display.tab_width, bool) or not isinstance(display.tab_width, int) or display.tab_width < 1:
        raise ConfigError(f"display.tab_width must be a positive integer, got {display.tab_width!r}")
    if isinstance(display.context, bool) or not isinstance(display.context, int) or display.context < 0:
        raise ConfigError(f"display.context must be a non-negative integer, got {display.context!r}")


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> InlineDiffConfig:
    """Load, validate, and return an InlineDiffConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = InlineDiffConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = InlineDiffConfig(
            version=raw.get("version", "1.0"),
            display=_build_section(raw, DisplayConfig, "display"),
        )

    validate(cfg)
    _merge_env_overrides(cfg)
    return cfg
