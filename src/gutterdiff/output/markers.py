"""Map a classification onto the lines of the current file."""

from __future__ import annotations

from typing import Dict, List, Optional

from gutterdiff.diff.models import GutterMarker, LineChange, ParsedDiff


def clamp_anchor(line: int, line_count: int) -> Optional[int]:
    """Pull a deletion anchor past the end of the file back onto the last line."""
    if line_count <= 0 or line <= 0:
        return None
    return min(line, line_count)


def build_gutter_markers(
    parsed: ParsedDiff,
    line_count: int,
    *,
    clamp_deleted: bool = False,
) -> List[GutterMarker]:
    """Return gutter markers for lines ``1..line_count``, sorted by line.

    Entries outside the file are dropped. With *clamp_deleted*, a deletion
    anchor past the last line is moved onto it instead.
    """
    markers: List[GutterMarker] = []

    for line in parsed.added_lines:
        if 0 < line <= line_count:
            markers.append(GutterMarker(line, LineChange.ADDED))

    for line in parsed.modified_lines:
        if 0 < line <= line_count:
            markers.append(GutterMarker(line, LineChange.MODIFIED))

    for line in parsed.deleted_at_lines:
        target: Optional[int] = line
        if clamp_deleted:
            target = clamp_anchor(line, line_count)
        if target is not None and 0 < target <= line_count:
            markers.append(GutterMarker(target, LineChange.DELETED))

    # sort() is stable, so equal lines keep added/modified/deleted order
    markers.sort(key=lambda m: m.line)
    return markers


def line_decorations(parsed: ParsedDiff, line_count: int) -> Dict[int, LineChange]:
    """Background decoration per line. Deletion anchors never get one."""
    decorations: Dict[int, LineChange] = {}
    for line in parsed.added_lines:
        if 0 < line <= line_count:
            decorations[line] = LineChange.ADDED
    for line in parsed.modified_lines:
        if 0 < line <= line_count:
            decorations[line] = LineChange.MODIFIED
    return dict(sorted(decorations.items()))
