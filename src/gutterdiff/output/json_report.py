"""JSON reporter for editor integrations and scripts."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from gutterdiff.diff.aggregator import all_changed
from gutterdiff.diff.models import ParsedDiff


def to_dict(parsed: ParsedDiff, *, path: Optional[str] = None) -> Dict[str, Any]:
    """Convert a ParsedDiff to a JSON-serialisable dict."""
    return {
        "version": "1.0",
        "file": path,
        "added_lines": list(parsed.added_lines),
        "modified_lines": list(parsed.modified_lines),
        "deleted_at_lines": list(parsed.deleted_at_lines),
        "changed_lines": sorted(all_changed(parsed)),
        "total_changes": parsed.total_changes,
    }


def render(parsed: ParsedDiff, *, path: Optional[str] = None) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(parsed, path=path), indent=2)
