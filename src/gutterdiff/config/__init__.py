"""Configuration loading, schema, and defaults."""

from gutterdiff.config.loader import ConfigError, find_config_file, load_config
from gutterdiff.config.schema import GutterDiffConfig, OutputFormat

__all__ = [
    "ConfigError",
    "GutterDiffConfig",
    "OutputFormat",
    "find_config_file",
    "load_config",
]
