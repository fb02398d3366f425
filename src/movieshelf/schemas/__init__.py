"""Pydantic schemas for API responses."""

from movieshelf.schemas.movie import ErrorResponse, MovieResponse, MovieSummaryResponse

__all__ = [
    "ErrorResponse",
    "MovieResponse",
    "MovieSummaryResponse",
]
