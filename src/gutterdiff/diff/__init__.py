"""Diff classification — classifier, aggregator, models."""

from gutterdiff.diff.aggregator import all_changed
from gutterdiff.diff.classifier import DiffClassifier, classify
from gutterdiff.diff.models import GutterMarker, LineChange, ParsedDiff

__all__ = [
    "DiffClassifier",
    "GutterMarker",
    "LineChange",
    "ParsedDiff",
    "all_changed",
    "classify",
]
