"""Configuration loading, schema, and defaults."""

from inlinediff.config.loader import ConfigError, load_config
from inlinediff.config.schema import DisplayConfig, DisplayOptions, InlineDiffConfig

__all__ = [
    "ConfigError",
    "DisplayConfig",
    "DisplayOptions",
    "InlineDiffConfig",
    "load_config",
]
