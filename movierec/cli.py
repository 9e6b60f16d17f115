from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path

import pandas as pd

from .config import load_settings
from .service import MovieRecommender
from .utils import setup_logging


logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Recommend movies with similar genres (cosine similarity).")
    target = p.add_mutually_exclusive_group(required=True)
    target.add_argument("--movie-id", type=int, help="MovieLens item id (first field of u.item)")
    target.add_argument("--title", type=str, help="Movie title; fuzzy-matched against the catalog")
    target.add_argument("--search", type=str, help="List catalog titles closest to this text and exit")
    p.add_argument("--k", type=int, default=None, help="How many recommendations to return (default from config)")
    p.add_argument("--config", type=Path, default=None, help="Path to config YAML")
    p.add_argument("--items", type=Path, default=None, help="Override dataset.items_path")
    p.add_argument("--ratings", type=Path, default=None, help="Override dataset.ratings_path")
    p.add_argument("--json", action="store_true", help="Print one JSON object per row")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.getenv("LOG_LEVEL", "WARNING"),
        help="Logging level",
    )
    return p


def _print_search(rec: MovieRecommender, query: str, *, limit: int, as_json: bool) -> None:
    hits = rec.catalog.search_titles(query, limit=limit)
    rows = [
        {"movie_id": item.id, "title": item.title, "genres": ", ".join(sorted(item.tags)), "score": round(score, 3)}
        for item, score in hits
    ]
    if as_json:
        for row in rows:
            print(json.dumps(row))
        return

    print(f"\n=== Titles matching {query!r} ===")
    if not rows:
        print("No matching titles.")
        return
    print(pd.DataFrame(rows).to_string(index=False))


def main(argv: list[str] | None = None) -> None:
    args = build_arg_parser().parse_args(argv)

    try:
        # LOG_LEVEL from the environment bypasses argparse choices.
        setup_logging(args.log_level)
        settings = load_settings(args.config)
        overrides = {}
        if args.items is not None:
            overrides["items_path"] = args.items.resolve()
        if args.ratings is not None:
            overrides["ratings_path"] = args.ratings.resolve()
        if overrides:
            settings = settings.model_copy(update={"dataset": settings.dataset.model_copy(update=overrides)})

        rec = MovieRecommender.from_settings(settings)
        if args.search is not None:
            limit = rec.limit if args.k is None else args.k
            if limit <= 0:
                raise ValueError(f"--k must be a positive integer, got {limit}")
            _print_search(rec, args.search, limit=limit, as_json=args.json)
            return
        if args.movie_id is not None:
            reference = rec.catalog.get(args.movie_id)
            rows = rec.recommend_for_item(reference, limit=args.k)
        else:
            reference, rows = rec.recommend_for_title(args.title, limit=args.k)
    except (KeyError, ValueError) as exc:
        logger.error("%s", exc)
        raise SystemExit(2) from exc

    if args.json:
        for row in rows:
            print(row.model_dump_json())
        return

    print(f"\n=== Movies similar to {reference.title} ===")
    print(f"Genres: {', '.join(sorted(reference.tags)) or '-'}")
    if not rows:
        print("No recommendations found.")
        return

    df = pd.DataFrame([r.model_dump() for r in rows])
    df["genres"] = df["genres"].apply(lambda xs: ", ".join(xs))
    df["similarity"] = (df["similarity"] * 100).round(1).astype(str) + "%"
    df["average_rating"] = df["average_rating"].round(1)
    print(df.to_string(index=False))


if __name__ == "__main__":
    main()
