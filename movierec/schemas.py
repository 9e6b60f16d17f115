"""Pydantic schemas for recommendation output."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RecommendationRow(BaseModel):
    """A single recommended movie, annotated with its rating summary."""

    movie_id: int
    title: str
    genres: list[str] = Field(default_factory=list, description="Sorted genre tags.")
    similarity: float = Field(..., ge=0.0, le=1.0)
    average_rating: float = Field(0.0, description="Mean rating; 0.0 when rating_count is 0.")
    rating_count: int = Field(0, ge=0)
