"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS: tuple[str, ...] = ("terminal", "json")


@dataclass
class GitConfig:
    timeout: int = 30
    include_staged: bool = True  # fall back to index vs HEAD when worktree is clean
    context_lines: int = 3


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True
    show_content: bool = True


@dataclass
class MarkersConfig:
    added: str = "▌"
    modified: str = "▌"
    deleted: str = "▁"
    added_style: str = "green"
    modified_style: str = "yellow"
    deleted_style: str = "red"


@dataclass
class GutterDiffConfig:
    version: str = "1.0"
    git: GitConfig = field(default_factory=GitConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    markers: MarkersConfig = field(default_factory=MarkersConfig)
