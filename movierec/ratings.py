"""Per-item rating aggregates used to annotate recommendations."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .data import RatingRecord


def _values_for(item_id: int, ratings: Iterable[RatingRecord]) -> list[float]:
    return [float(r.value) for r in ratings if r.item_id == int(item_id)]


def average_rating(item_id: int, ratings: Iterable[RatingRecord]) -> float:
    """Mean rating for `item_id`, or 0.0 when the item has no ratings.

    0.0 is a "no data" sentinel; use `rating_count` to tell it apart from a
    genuine average of zero.
    """
    values = _values_for(item_id, ratings)
    if not values:
        return 0.0
    return float(np.mean(values))


def rating_count(item_id: int, ratings: Iterable[RatingRecord]) -> int:
    return len(_values_for(item_id, ratings))
