"""Recommendation facade that owns the catalog and ratings lifecycle."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .catalog import Catalog
from .config import Settings
from .data import Item, RatingRecord, load_ratings
from .ratings import average_rating, rating_count
from .recommender import DEFAULT_LIMIT, ScoredItem, recommend
from .schemas import RecommendationRow


logger = logging.getLogger(__name__)


class MovieRecommender:
    """Genre-similarity recommender over a fixed catalog snapshot.

    Ratings only annotate results; they never affect the ranking. Build a new
    instance (or call `replace_catalog`) when the catalog changes.
    """

    def __init__(
        self,
        catalog: Catalog,
        ratings: Iterable[RatingRecord] = (),
        *,
        limit: int = DEFAULT_LIMIT,
        min_title_similarity: float = 0.6,
    ) -> None:
        self.catalog = catalog
        self.ratings = tuple(ratings)
        self.limit = int(limit)
        self.min_title_similarity = float(min_title_similarity)

        logger.info(
            "Recommender ready: items=%d genres=%d ratings=%d",
            len(self.catalog),
            len(self.catalog.vocabulary),
            len(self.ratings),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "MovieRecommender":
        ds = settings.dataset
        catalog = Catalog.from_file(ds.items_path, encoding=ds.encoding)
        ratings: list[RatingRecord] = []
        if ds.ratings_path is not None:
            ratings = load_ratings(ds.ratings_path, encoding=ds.encoding)
        return cls(
            catalog,
            ratings,
            limit=settings.recommend.limit,
            min_title_similarity=settings.recommend.min_title_similarity,
        )

    def replace_catalog(self, catalog: Catalog) -> None:
        """Swap in a freshly loaded catalog (and therefore a rebuilt vocabulary)."""
        self.catalog = catalog
        logger.info("Catalog replaced: items=%d genres=%d", len(catalog), len(catalog.vocabulary))

    def _row(self, scored: ScoredItem) -> RecommendationRow:
        item = scored.item
        return RecommendationRow(
            movie_id=item.id,
            title=item.title,
            genres=sorted(item.tags),
            similarity=scored.similarity,
            average_rating=average_rating(item.id, self.ratings),
            rating_count=rating_count(item.id, self.ratings),
        )

    def recommend_for(self, movie_id: int, *, limit: Optional[int] = None) -> list[RecommendationRow]:
        """Recommend movies sharing genres with `movie_id`.

        Raises KeyError for an unknown id and InvalidLimitError for a
        non-positive limit.
        """
        reference = self.catalog.get(movie_id)
        return self.recommend_for_item(reference, limit=limit)

    def recommend_for_item(self, reference: Item, *, limit: Optional[int] = None) -> list[RecommendationRow]:
        k = self.limit if limit is None else limit
        results = recommend(reference, self.catalog.items, self.catalog.vocabulary, k)
        return [self._row(s) for s in results]

    def recommend_for_title(
        self, query: str, *, limit: Optional[int] = None
    ) -> tuple[Item, list[RecommendationRow]]:
        """Resolve `query` to a catalog title, then recommend for that movie."""
        item, score = self.catalog.resolve_title(query, min_similarity=self.min_title_similarity)
        if item is None:
            raise KeyError(f"No catalog title matches {query!r} (best score {score:.2f})")
        logger.info("Resolved %r to movie %d %r (score %.2f)", query, item.id, item.title, score)
        return item, self.recommend_for_item(item, limit=limit)
