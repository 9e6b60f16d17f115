from __future__ import annotations

import pytest

from movierec.catalog import Catalog, normalize_title
from movierec.data import Item


def test_normalize_title_strips_year_and_punctuation() -> None:
    assert normalize_title("Usual Suspects, The (1995)") == "usual suspects the"
    assert normalize_title("  Se7en  ") == "se7en"
    assert normalize_title("") == ""


def test_catalog_builds_vocabulary_and_lookup(movie_catalog: list[Item]) -> None:
    catalog = Catalog.from_items(movie_catalog)

    assert len(catalog) == len(movie_catalog)
    assert catalog.vocabulary == tuple(sorted(set().union(*(i.tags for i in movie_catalog))))
    assert catalog.get(4).title == "Get Shorty (1995)"
    assert catalog.has_item(13)
    assert not catalog.has_item(14)


def test_get_unknown_id_raises_key_error(movie_catalog: list[Item]) -> None:
    with pytest.raises(KeyError):
        Catalog.from_items(movie_catalog).get(12345)


def test_duplicate_ids_rejected() -> None:
    items = [Item(id=1, title="A"), Item(id=1, title="B")]
    with pytest.raises(ValueError, match="duplicate"):
        Catalog.from_items(items)


def test_resolve_title_exact_and_fuzzy(movie_catalog: list[Item]) -> None:
    catalog = Catalog.from_items(movie_catalog)

    item, score = catalog.resolve_title("toy story", min_similarity=0.6)
    assert item is not None and item.id == 1
    assert score == 1.0

    item, score = catalog.resolve_title("Golden Eye", min_similarity=0.6)
    assert item is not None and item.id == 2
    assert 0.6 <= score < 1.0


def test_resolve_title_below_threshold(movie_catalog: list[Item]) -> None:
    catalog = Catalog.from_items(movie_catalog)
    item, score = catalog.resolve_title("zzzz qqqq", min_similarity=0.9)
    assert item is None
    assert score < 0.9

    assert catalog.resolve_title("   ", min_similarity=0.1) == (None, 0.0)


def test_resolve_title_prefers_lowest_id_among_duplicates() -> None:
    catalog = Catalog.from_items(
        [Item(id=7, title="Heat (1995)"), Item(id=3, title="Heat (1986)"), Item(id=9, title="Other")]
    )
    item, _ = catalog.resolve_title("Heat", min_similarity=0.5)
    assert item is not None and item.id == 3


def test_search_titles_limits_and_orders(movie_catalog: list[Item]) -> None:
    catalog = Catalog.from_items(movie_catalog)
    hits = catalog.search_titles("toy story", limit=3)

    assert 1 <= len(hits) <= 3
    assert hits[0][0].id == 1
    scores = [s for _, s in hits]
    assert scores == sorted(scores, reverse=True)


def test_catalog_is_hashable_by_identity(movie_catalog: list[Item]) -> None:
    first = Catalog.from_items(movie_catalog)
    second = Catalog.from_items(movie_catalog)

    assert hash(first) == hash(first)
    assert len({first, second, first}) == 2
    with pytest.raises(AttributeError):
        first.items = ()  # type: ignore[misc]
