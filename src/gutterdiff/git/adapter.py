"""Git subprocess wrapper — per-file diffs in the gutter prefix encoding.

Output lines use a two-character prefix: ``"+ "`` for additions,
``"- "`` for deletions and ``"  "`` for context. Hunk headers and file
headers are passed through as git prints them. Untracked files have no
headers; every line is reported as an addition.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(args: list[str], cwd: Path, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            timeout=timeout,
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    # Decoded from bytes so only "\n" separates lines
    stdout = result.stdout.decode("utf-8", errors="replace")
    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        # Warnings without "fatal" are not errors
        if not stderr or "fatal" not in stderr.lower():
            return stdout
        raise GitError(f"git error: {stderr}")
    return stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def is_untracked(repo_root: Path, file_path: str, timeout: int = 30) -> bool:
    """Return True if *file_path* exists in the working tree but not in git."""
    out = _run_git(
        ["ls-files", "--others", "--exclude-standard", "--", file_path],
        cwd=repo_root,
        timeout=timeout,
    )
    return bool(out.strip())


def encode_unified_diff(diff_text: str) -> str:
    """Convert git's unified patch output to the prefix encoding.

    Only lines inside a hunk are re-prefixed; file headers (``diff --git``,
    ``index``, ``---``/``+++``) pass through unchanged and stay inert.
    """
    out: List[str] = []
    in_hunk = False
    lines = diff_text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for line in lines:
        if line.startswith("diff --git"):
            in_hunk = False
            out.append(line)
        elif line.startswith("@@"):
            in_hunk = True
            out.append(line)
        elif not in_hunk:
            out.append(line)
        elif line.startswith("+"):
            out.append("+ " + line[1:])
        elif line.startswith("-"):
            out.append("- " + line[1:])
        elif line.startswith(" "):
            out.append("  " + line[1:])
        else:
            # "\ No newline at end of file" and anything unexpected
            out.append(line)
    return "\n".join(out)


def split_lines(content: str) -> List[str]:
    """Split file content the way git numbers it: on ``"\\n"`` only.

    A trailing ``"\\r"`` is dropped from each line and a final newline does
    not start an extra line.
    """
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_lines(path: Path) -> List[str]:
    """Read *path* as UTF-8 without newline translation and split it."""
    return split_lines(path.read_bytes().decode("utf-8", errors="replace"))


def encode_untracked(content: str) -> str:
    """Report every line of a new file as an addition, with no hunk header."""
    return "\n".join("+ " + line for line in split_lines(content))


def get_file_diff(
    repo_root: Path,
    file_path: str,
    *,
    context_lines: int = 3,
    include_staged: bool = True,
    timeout: int = 30,
) -> str:
    """Return the prefix-encoded diff of *file_path* against the index or HEAD.

    Untracked files are returned in full as additions. When the working tree
    has no changes for the file and *include_staged* is set, the staged diff
    (index vs HEAD) is used instead.
    """
    if is_untracked(repo_root, file_path, timeout=timeout):
        try:
            content = (repo_root / file_path).read_bytes()
        except OSError:
            return ""
        return encode_untracked(content.decode("utf-8", errors="replace"))

    base_args = ["diff", "--no-color", f"--unified={context_lines}"]
    diff_text = _run_git([*base_args, "--", file_path], cwd=repo_root, timeout=timeout)
    if not diff_text.strip() and include_staged:
        diff_text = _run_git(
            [*base_args, "--cached", "--", file_path],
            cwd=repo_root,
            timeout=timeout,
        )
    return encode_unified_diff(diff_text)
