"""Pydantic schemas for movie responses."""

from pydantic import BaseModel, ConfigDict


class MovieResponse(BaseModel):
    """Full movie representation."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    year: int | None = None
    length: int | None = None
    director: str | None = None
    description: str
    poster_url: str | None = None
    category: str | None = None
    discount: bool
    female_director: bool


class MovieSummaryResponse(BaseModel):
    """Title plus truncated description."""

    summary: str


class ErrorResponse(BaseModel):
    """Body returned for a failed lookup."""

    error: str
