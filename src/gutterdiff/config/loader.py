"""Load configuration from .gutterdiff.toml / .gutterdiff.yaml and env vars."""

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

import yaml

from gutterdiff.config.schema import (
    OUTPUT_FORMATS,
    GitConfig,
    GutterDiffConfig,
    MarkersConfig,
    OutputConfig,
)

CONFIG_FILENAMES = (".gutterdiff.toml", ".gutterdiff.yaml", ".gutterdiff.yml")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    for name in CONFIG_FILENAMES:
        candidate = repo_root / name
        if candidate.is_file():
            return candidate
    return None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _parse_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Failed to parse {path}: top level must be a mapping")
    return data


def _merge_env_overrides(cfg: GutterDiffConfig) -> None:
    """Apply GUTTERDIFF_* environment variable overrides."""
    if val := os.environ.get("GUTTERDIFF_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("GUTTERDIFF_GIT_TIMEOUT"):
        try:
            cfg.git.timeout = int(val)
        except ValueError:
            pass


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a config section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    raw = data.get(section) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Section [{section}] must be a table")
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> GutterDiffConfig:
    """Load, validate, and return a GutterDiffConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = GutterDiffConfig()
    else:
        if config_path.suffix in (".yaml", ".yml"):
            raw = _parse_yaml(config_path)
        else:
            raw = _parse_toml(config_path)
        cfg = GutterDiffConfig(
            version=str(raw.get("version", "1.0")),
            git=_build_section(raw, GitConfig, "git"),
            output=_build_section(raw, OutputConfig, "output"),
            markers=_build_section(raw, MarkersConfig, "markers"),
        )

    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid output format: {cfg.output.format}")

    _merge_env_overrides(cfg)
    return cfg
