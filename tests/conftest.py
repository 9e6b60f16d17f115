from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure `import movierec` works without an editable install.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from movierec.data import Item, RatingRecord  # noqa: E402


@pytest.fixture
def abc_catalog() -> list[Item]:
    return [
        Item(id=1, title="A", tags=frozenset({"Action", "Comedy"})),
        Item(id=2, title="B", tags=frozenset({"Action"})),
        Item(id=3, title="C", tags=frozenset({"Drama"})),
    ]


@pytest.fixture
def movie_catalog() -> list[Item]:
    return [
        Item(id=1, title="Toy Story (1995)", tags=frozenset({"Animation", "Children's", "Comedy"})),
        Item(id=2, title="GoldenEye (1995)", tags=frozenset({"Action", "Adventure", "Thriller"})),
        Item(id=3, title="Four Rooms (1995)", tags=frozenset({"Thriller"})),
        Item(id=4, title="Get Shorty (1995)", tags=frozenset({"Action", "Comedy", "Drama"})),
        Item(id=5, title="Copycat (1995)", tags=frozenset({"Crime", "Drama", "Thriller"})),
        Item(id=8, title="Babe (1995)", tags=frozenset({"Children's", "Comedy", "Drama"})),
        Item(id=9, title="Dead Man Walking (1995)", tags=frozenset({"Drama"})),
        Item(id=13, title="Mighty Aphrodite (1995)", tags=frozenset({"Comedy", "Drama"})),
        Item(id=99, title="Untitled", tags=frozenset()),
    ]


@pytest.fixture
def ratings() -> list[RatingRecord]:
    return [
        RatingRecord(user_id=196, item_id=1, value=3, timestamp=881250949),
        RatingRecord(user_id=186, item_id=1, value=5, timestamp=891717742),
        RatingRecord(user_id=22, item_id=4, value=1, timestamp=878887116),
        RatingRecord(user_id=244, item_id=8, value=4, timestamp=880606923),
        RatingRecord(user_id=166, item_id=8, value=5, timestamp=886397596),
    ]
