"""In-memory movie catalog with id lookup and title resolution."""

from __future__ import annotations

import re
from dataclasses import dataclass
from difflib import SequenceMatcher
from pathlib import Path
from typing import Iterable

from .data import Item, load_items
from .features import Vocabulary, build_vocabulary


_TITLE_YEAR_SUFFIX_RE = re.compile(r"\(\d{4}\)\s*$")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_MULTISPACE_RE = re.compile(r"\s+")


def normalize_title(text: str) -> str:
    """Normalize title-ish text for matching.

    - Lowercase
    - Strip
    - Remove trailing "(YYYY)"
    - Remove punctuation (keep a-z, 0-9)
    - Collapse whitespace
    """
    text = "" if text is None else str(text)
    text = text.strip().lower()
    text = _TITLE_YEAR_SUFFIX_RE.sub("", text).strip()
    text = _NON_ALNUM_RE.sub(" ", text)
    text = _MULTISPACE_RE.sub(" ", text).strip()
    return text


@dataclass(frozen=True, eq=False)
class Catalog:
    """Immutable catalog snapshot; build a new one to pick up changed items.

    The vocabulary is derived once from the items at construction time.
    """

    items: tuple[Item, ...]
    vocabulary: Vocabulary
    item_id_to_index: dict[int, int]
    norm_title_to_item_ids: dict[str, list[int]]

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> "Catalog":
        items = tuple(items)

        item_id_to_index: dict[int, int] = {}
        for i, item in enumerate(items):
            if item.id in item_id_to_index:
                raise ValueError(f"duplicate item id in catalog: {item.id}")
            item_id_to_index[item.id] = i

        norm_title_to_item_ids: dict[str, list[int]] = {}
        for item in items:
            key = normalize_title(item.title)
            if not key:
                continue
            norm_title_to_item_ids.setdefault(key, []).append(item.id)

        return cls(
            items=items,
            vocabulary=build_vocabulary(items),
            item_id_to_index=item_id_to_index,
            norm_title_to_item_ids=norm_title_to_item_ids,
        )

    @classmethod
    def from_file(cls, path: Path, *, encoding: str = "latin-1") -> "Catalog":
        """Load a `u.item` file and build lookup indexes."""
        return cls.from_items(load_items(path, encoding=encoding))

    def __len__(self) -> int:
        return len(self.items)

    def has_item(self, item_id: int) -> bool:
        return int(item_id) in self.item_id_to_index

    def get(self, item_id: int) -> Item:
        """Return the item with `item_id`."""
        item_id = int(item_id)
        if item_id not in self.item_id_to_index:
            raise KeyError(f"item id not found: {item_id}")
        return self.items[self.item_id_to_index[item_id]]

    def search_titles(self, query: str, *, limit: int = 10) -> list[tuple[Item, float]]:
        """Return (item, match score) pairs for the closest titles."""
        query_norm = normalize_title(query)
        if not query_norm:
            return []

        scored: list[tuple[str, float]] = []
        for title in self.norm_title_to_item_ids:
            score = SequenceMatcher(None, query_norm, title).ratio()
            if score <= 0.0:
                continue
            scored.append((title, float(score)))

        scored.sort(key=lambda x: x[1], reverse=True)
        out: list[tuple[Item, float]] = []
        for title_norm, score in scored:
            for item_id in self.norm_title_to_item_ids[title_norm]:
                out.append((self.get(item_id), score))
                if len(out) >= int(limit):
                    return out
        return out

    def resolve_title(self, query: str, *, min_similarity: float) -> tuple[Item | None, float]:
        """Resolve a user query to an item via exact, then fuzzy, title match.

        Returns (item or None, similarity score). Among duplicate titles the
        lowest id wins.
        """
        query_norm = normalize_title(query)
        if not query_norm:
            return None, 0.0

        exact = self.norm_title_to_item_ids.get(query_norm)
        if exact:
            return self.get(min(exact)), 1.0

        best_title: str | None = None
        best_score = 0.0
        for cand in self.norm_title_to_item_ids:
            s = SequenceMatcher(None, query_norm, cand).ratio()
            if s > best_score:
                best_title = cand
                best_score = float(s)

        if best_title is None or best_score < float(min_similarity):
            return None, best_score

        return self.get(min(self.norm_title_to_item_ids[best_title])), best_score
