"""Renderers for classified diffs."""

from gutterdiff.output.markers import build_gutter_markers, clamp_anchor, line_decorations

__all__ = [
    "build_gutter_markers",
    "clamp_anchor",
    "line_decorations",
]
