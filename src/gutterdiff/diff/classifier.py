"""Line-change classifier for prefix-encoded diffs.

Input lines are recognised by prefix only:

* ``@@ -a[,b] +c[,d] @@`` hunk headers reset the new-file position
* ``"+ "`` additions, ``"- "`` deletions, ``"  "`` context
* anything else is ignored

A deletion immediately followed by an addition is reported as a
modification. Pairing is sequential: the Nth addition after a run of
deletions pairs with the Nth deletion, with no content comparison.
"""

from __future__ import annotations

import re
from typing import List

from gutterdiff.diff.models import ParsedDiff

# Only the new-side start is used; everything after it is ignored.
_HUNK_HEADER_RE = re.compile(r"@@ -\d+(?:,\d+)? \+(\d+)", re.ASCII)

_HUNK_PREFIX = "@@"
_ADDED_PREFIX = "+ "
_DELETED_PREFIX = "- "
_CONTEXT_PREFIX = "  "


class DiffClassifier:
    """Classify the lines of a prefix-encoded diff in a single pass.

    Usage::

        parsed = DiffClassifier(diff_text).classify()
        parsed.added_lines, parsed.modified_lines, parsed.deleted_at_lines

    Never raises: malformed hunk headers leave the position unchanged and
    unknown lines are skipped.
    """

    def __init__(self, diff_text: str) -> None:
        self._lines = diff_text.split("\n") if diff_text else []

    def classify(self) -> ParsedDiff:
        added: List[int] = []
        modified: List[int] = []
        deleted_at: List[int] = []

        line_no = 0  # last numbered line in the new file
        pending = 0  # unpaired deletions in the current run
        anchor = 0

        for line in self._lines:
            if line.startswith(_HUNK_PREFIX):
                # Flush before the position moves
                if pending > 0:
                    deleted_at.append(anchor)
                    pending = 0
                m = _HUNK_HEADER_RE.search(line)
                if m:
                    line_no = int(m.group(1)) - 1
            elif line.startswith(_ADDED_PREFIX):
                line_no += 1
                if pending > 0:
                    modified.append(line_no)
                    pending -= 1
                else:
                    added.append(line_no)
            elif line.startswith(_DELETED_PREFIX):
                if pending == 0:
                    anchor = line_no + 1
                pending += 1
            elif line.startswith(_CONTEXT_PREFIX):
                if pending > 0:
                    deleted_at.append(anchor)
                    pending = 0
                line_no += 1

        # Trailing deletions
        if pending > 0:
            deleted_at.append(anchor)

        return ParsedDiff(
            added_lines=tuple(added),
            modified_lines=tuple(modified),
            deleted_at_lines=tuple(deleted_at),
        )


def classify(diff_text: str) -> ParsedDiff:
    """Classify *diff_text* into added, modified and deleted-at line numbers."""
    return DiffClassifier(diff_text).classify()
