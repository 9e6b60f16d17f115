"""Category vocabulary and binary feature vectors for catalog items."""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np

from .data import Item


Vocabulary = Tuple[str, ...]


def build_vocabulary(items: Iterable[Item]) -> Vocabulary:
    """Return every distinct tag across `items`, sorted lexicographically.

    Tags are compared verbatim: "Drama" and "drama" are two entries.
    """
    tags: set[str] = set()
    for item in items:
        tags.update(item.tags)
    return tuple(sorted(tags))


def vectorize(tags: Iterable[str], vocabulary: Sequence[str]) -> np.ndarray:
    """Binary vector with a 1 at each vocabulary position present in `tags`.

    Tags missing from `vocabulary` are ignored.
    """
    tag_set = tags if isinstance(tags, (set, frozenset)) else set(tags)
    return np.fromiter(
        (1.0 if tag in tag_set else 0.0 for tag in vocabulary),
        dtype=np.float64,
        count=len(vocabulary),
    )
