"""Content-based ranking of catalog items by genre-vector cosine similarity."""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Iterable, Sequence

from .data import Item
from .errors import InvalidLimitError
from .features import vectorize
from .similarity import cosine_similarity


logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 6


@dataclass(frozen=True)
class ScoredItem:
    item: Item
    similarity: float


def _check_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, numbers.Integral) or limit <= 0:
        raise InvalidLimitError(limit)
    return int(limit)


def recommend(
    reference: Item,
    catalog: Iterable[Item],
    vocabulary: Sequence[str],
    limit: int = DEFAULT_LIMIT,
) -> list[ScoredItem]:
    """Rank `catalog` by similarity to `reference` and keep the top `limit`.

    Scoring:
    - Every item is vectorized against `vocabulary`; the vocabulary is assumed
      to cover the catalog and is not checked.
    - The reference item (matched by id) is never part of the result.
    - Equal scores keep their catalog order.
    """
    limit = _check_limit(limit)
    ref_vec = vectorize(reference.tags, vocabulary)

    scored = [
        ScoredItem(item=item, similarity=cosine_similarity(ref_vec, vectorize(item.tags, vocabulary)))
        for item in catalog
        if item.id != reference.id
    ]
    # list.sort is stable, also with reverse=True.
    scored.sort(key=lambda s: s.similarity, reverse=True)

    logger.debug(
        "Scored %d candidates for item %d, keeping %d",
        len(scored),
        reference.id,
        min(limit, len(scored)),
    )
    return scored[:limit]
