"""Data models for diff classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class LineChange(str, Enum):
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"


@dataclass(frozen=True)
class ParsedDiff:
    """Classified line numbers for the new version of a file.

    All values are 1-indexed. ``deleted_at_lines`` holds anchors: the line
    just after the point where a block was removed, which may not exist in
    the new content.
    """

    added_lines: Tuple[int, ...] = ()
    modified_lines: Tuple[int, ...] = ()
    deleted_at_lines: Tuple[int, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.added_lines or self.modified_lines or self.deleted_at_lines)

    @property
    def total_changes(self) -> int:
        return len(self.added_lines) + len(self.modified_lines) + len(self.deleted_at_lines)


@dataclass(frozen=True, slots=True)
class GutterMarker:
    """A single gutter marker at a line of the new file."""

    line: int
    change: LineChange
