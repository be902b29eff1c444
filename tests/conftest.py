"""Shared test fixtures — sample diffs and temp git repos."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest


@pytest.fixture
def sample_diff_modified() -> str:
    """A single-line modification surrounded by context."""
    return (
        "@@ -1,3 +1,3 @@\n"
        "  context before\n"
        "- old line\n"
        "+ new line\n"
        "  context after"
    )


@pytest.fixture
def sample_diff_multi_hunk() -> str:
    """Two hunks, one addition in each."""
    return (
        "@@ -1,2 +1,3 @@\n"
        "  line 1\n"
        "+ added in first hunk\n"
        "  line 2\n"
        "@@ -10,2 +11,3 @@\n"
        "  line 10\n"
        "+ added in second hunk\n"
        "  line 11"
    )


@pytest.fixture
def sample_diff_untracked() -> str:
    """A new file as produced for untracked paths: no header, all additions."""
    return "+ line 1\n+ line 2\n+ line 3"


@pytest.fixture
def sample_diff_with_file_headers() -> str:
    """A full git patch in the prefix encoding, file headers included."""
    return (
        "diff --git a/app.py b/app.py\n"
        "index 1234567..abcdef0 100644\n"
        "--- a/app.py\n"
        "+++ b/app.py\n"
        "@@ -1,4 +1,4 @@ def main():\n"
        "  import os\n"
        "- DEBUG = True\n"
        "+ DEBUG = False\n"
        "  \n"
        "  print(os.getcwd())"
    )


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, capture_output=True, check=True)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository with one committed file."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    _git(tmp_path, "config", "user.email", "test@test.com")
    _git(tmp_path, "config", "user.name", "Test")
    _git(tmp_path, "config", "commit.gpgsign", "false")
    (tmp_path / "notes.txt").write_text("one\ntwo\nthree\nfour\nfive\n")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-m", "init")
    return tmp_path
