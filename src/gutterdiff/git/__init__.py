"""Git interface layer — produces prefix-encoded diffs for single files."""

from gutterdiff.git.adapter import (
    GitError,
    encode_unified_diff,
    encode_untracked,
    get_file_diff,
    get_repo_root,
    is_untracked,
)

__all__ = [
    "GitError",
    "encode_unified_diff",
    "encode_untracked",
    "get_file_diff",
    "get_repo_root",
    "is_untracked",
]
