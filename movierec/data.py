from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

import pandas as pd


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Item:
    id: int
    title: str
    tags: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class RatingRecord:
    user_id: int
    item_id: int
    value: float
    timestamp: int


# Genre flag columns of MovieLens-100k `u.item`, in file order (fields 5..23).
MOVIELENS_GENRES: Tuple[str, ...] = (
    "unknown",
    "Action",
    "Adventure",
    "Animation",
    "Children's",
    "Comedy",
    "Crime",
    "Documentary",
    "Drama",
    "Fantasy",
    "Film-Noir",
    "Horror",
    "Musical",
    "Mystery",
    "Romance",
    "Sci-Fi",
    "Thriller",
    "War",
    "Western",
)

_GENRE_OFFSET = 5
_ITEM_FIELDS = _GENRE_OFFSET + len(MOVIELENS_GENRES)
_MIN_ITEM_FIELDS = 5
_RATING_FIELDS = 4


def _read_delimited(text: str, *, sep: str, n_fields: int) -> pd.DataFrame:
    """Read delimited records as strings.

    Short rows are padded with NaN; fields past `n_fields` are dropped and the
    row is kept.
    """
    if not text.strip():
        return pd.DataFrame(columns=list(range(n_fields)), dtype=object)

    overlong = 0

    def _truncate(fields: list[str]) -> list[str]:
        nonlocal overlong
        overlong += 1
        return fields[:n_fields]

    df = pd.read_csv(
        io.StringIO(text),
        sep=sep,
        header=None,
        names=list(range(n_fields)),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        quoting=csv.QUOTE_NONE,
        engine="python",
        on_bad_lines=_truncate,
    )
    if overlong:
        logger.debug("Dropped trailing fields from %d rows with more than %d fields", overlong, n_fields)
    return df


def parse_items(text: str) -> list[Item]:
    """Parse pipe-delimited `u.item` records into items, preserving file order.

    Notes
    -----
    - Lines with fewer than five fields are skipped.
    - Genre flags equal to "1" become tags; the `unknown` flag never does.
    - Duplicate ids are rejected, the catalog relies on stable unique ids.
    """
    df = _read_delimited(text, sep="|", n_fields=_ITEM_FIELDS)
    if df.empty:
        return []
    complete = df[_MIN_ITEM_FIELDS - 1].notna()
    ids = pd.to_numeric(df[0].str.strip(), errors="coerce")
    bad_ids = complete & ids.isna()
    if bad_ids.any():
        logger.warning("Skipping %d u.item rows with non-numeric ids", int(bad_ids.sum()))
    skipped = int((~complete).sum())
    if skipped:
        logger.debug("Skipping %d u.item rows with fewer than %d fields", skipped, _MIN_ITEM_FIELDS)

    df = df[complete & ids.notna()]
    ids = ids[df.index].astype("int64")
    if ids.duplicated().any():
        dupes = sorted(set(ids[ids.duplicated()].tolist()))
        raise ValueError(f"u.item has duplicate item ids: {dupes}")

    # Skip the leading `unknown` flag.
    genre_names = MOVIELENS_GENRES[1:]
    flags = df[list(range(_GENRE_OFFSET + 1, _ITEM_FIELDS))].eq("1")

    items: list[Item] = []
    for item_id, title, row_flags in zip(
        ids.tolist(), df[1].tolist(), flags.itertuples(index=False, name=None)
    ):
        tags = frozenset(g for g, on in zip(genre_names, row_flags) if on)
        items.append(Item(id=int(item_id), title=str(title).strip(), tags=tags))
    return items


def parse_ratings(text: str) -> list[RatingRecord]:
    """Parse tab-delimited `u.data` records (user, item, rating, timestamp)."""
    df = _read_delimited(text, sep="\t", n_fields=_RATING_FIELDS)
    df = df[df[_RATING_FIELDS - 1].notna()]
    if df.empty:
        return []

    numeric = pd.concat(
        [pd.to_numeric(df[col].str.strip(), errors="coerce") for col in df.columns],
        axis=1,
    )
    bad = numeric.isna().any(axis=1)
    if bad.any():
        logger.warning("Skipping %d u.data rows with non-numeric fields", int(bad.sum()))
    numeric = numeric[~bad]

    return [
        RatingRecord(
            user_id=int(user_id),
            item_id=int(item_id),
            value=float(value),
            timestamp=int(timestamp),
        )
        for user_id, item_id, value, timestamp in numeric.itertuples(index=False, name=None)
    ]


def load_items(path: Path, *, encoding: str = "latin-1") -> list[Item]:
    """Load the item catalog from a MovieLens `u.item` file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"u.item not found: {path}")
    items = parse_items(path.read_text(encoding=encoding))
    logger.info("Loaded %d items from %s", len(items), path)
    return items


def load_ratings(path: Path, *, encoding: str = "latin-1") -> list[RatingRecord]:
    """Load the ratings history from a MovieLens `u.data` file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"u.data not found: {path}")
    ratings = parse_ratings(path.read_text(encoding=encoding))
    logger.info("Loaded %d ratings from %s", len(ratings), path)
    return ratings
