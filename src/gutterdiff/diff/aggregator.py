"""Flatten a classification into a single changed-line set."""

from __future__ import annotations

from typing import Set

from gutterdiff.diff.models import ParsedDiff


def all_changed(parsed: ParsedDiff) -> Set[int]:
    """Return every line number that carries any kind of change marker."""
    changed: Set[int] = set(parsed.added_lines)
    changed.update(parsed.modified_lines)
    changed.update(parsed.deleted_at_lines)
    return changed
