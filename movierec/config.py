"""Settings loaded from `config.yaml`."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from .paths import get_repo_root, resolve_path
from .recommender import DEFAULT_LIMIT


logger = logging.getLogger(__name__)


class DatasetSettings(BaseModel):
    items_path: Path = Field(Path("data/sample/u.item"), description="MovieLens u.item file (pipe-delimited).")
    ratings_path: Optional[Path] = Field(
        Path("data/sample/u.data"),
        description="MovieLens u.data file (tab-delimited); null disables rating annotations.",
    )
    encoding: str = Field("latin-1", description="Text encoding of both files.")


class RecommendSettings(BaseModel):
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=100, description="Number of recommendations to return.")
    min_title_similarity: float = Field(
        0.6, ge=0.0, le=1.0, description="Minimum fuzzy match score when resolving a title query."
    )


class Settings(BaseModel):
    dataset: DatasetSettings = Field(default_factory=DatasetSettings)
    recommend: RecommendSettings = Field(default_factory=RecommendSettings)

    def resolved(self, base_dir: Path) -> "Settings":
        """Return a copy with dataset paths made absolute against `base_dir`."""
        ds = self.dataset
        dataset = ds.model_copy(
            update={
                "items_path": resolve_path(base_dir, ds.items_path),
                "ratings_path": (None if ds.ratings_path is None else resolve_path(base_dir, ds.ratings_path)),
            }
        )
        return self.model_copy(update={"dataset": dataset})


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    obj = yaml.safe_load(path.read_text())
    if obj is None:
        return {}
    if not isinstance(obj, dict):
        raise ValueError(f"Expected YAML mapping at {path}, got {type(obj)}")
    return obj


def default_config_path() -> Path:
    """`CONFIG_PATH` if set (relative to the repo root), else the repo `config.yaml`."""
    repo_root = get_repo_root()
    raw = os.getenv("CONFIG_PATH")
    if raw is None or str(raw).strip() == "":
        return repo_root / "config.yaml"
    return resolve_path(repo_root, str(raw))


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings; relative paths resolve against the repo root.

    An explicit `config_path` must exist. Without one, `CONFIG_PATH` or the repo
    `config.yaml` is used, falling back to built-in defaults if neither exists.
    """
    repo_root = get_repo_root()
    if config_path is None:
        config_path = default_config_path()
        if not config_path.exists():
            logger.info("No config at %s; using defaults", config_path)
            return Settings().resolved(repo_root)

    config_path = resolve_path(repo_root, config_path)
    settings = Settings.model_validate(_load_yaml(config_path))
    logger.debug("Loaded settings from %s", config_path)
    return settings.resolved(repo_root)
