"""gutterdiff — classify git diffs into gutter markers."""

from gutterdiff.diff import DiffClassifier, ParsedDiff, all_changed, classify

__version__ = "0.1.0"

__all__ = [
    "DiffClassifier",
    "ParsedDiff",
    "__version__",
    "all_changed",
    "classify",
]
