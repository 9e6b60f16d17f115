"""Exceptions raised by the recommendation core."""

from __future__ import annotations


class RecommenderError(ValueError):
    """Base class for caller errors detected by the recommendation core."""


class DimensionMismatchError(RecommenderError):
    """Two feature vectors were built against different vocabularies."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"feature vector length mismatch: {left} vs {right}")
        self.left = left
        self.right = right


class InvalidLimitError(RecommenderError):
    """The result limit passed to the ranker was not a positive integer."""

    def __init__(self, limit: object) -> None:
        super().__init__(f"limit must be a positive integer, got {limit!r}")
        self.limit = limit
