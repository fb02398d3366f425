"""
Movie projections.

Each route picks its output shape explicitly from PROJECTIONS. There is no
fallback that dumps every column, so timestamps never leak into a response.
"""

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any, NamedTuple

from movieshelf.models import Movie

SUMMARY_LENGTH = 50
SUMMARY_SUFFIX = "..."

FULL_FIELDS = (
    "id",
    "title",
    "year",
    "length",
    "director",
    "description",
    "poster_url",
    "category",
    "discount",
    "female_director",
)


def to_full(movie: Movie) -> dict[str, Any]:
    """Render every public field of a movie, in FULL_FIELDS order."""
    return {field: getattr(movie, field) for field in FULL_FIELDS}


def to_summary(movie: Movie) -> dict[str, str]:
    """
    Render a one-line summary: title, dash, start of the description.

    The description is cut to its first SUMMARY_LENGTH characters (shorter
    descriptions are used whole) and "..." is always appended.

    Example:
        "The Color Purple - Whoopi Goldberg brings Alice Walker's Pulitzer Pri..."
    """
    excerpt = movie.description[:SUMMARY_LENGTH]
    return {"summary": f"{movie.title} - {excerpt}{SUMMARY_SUFFIX}"}


def to_full_many(movies: Iterable[Movie]) -> list[dict[str, Any]]:
    return [to_full(movie) for movie in movies]


def to_summary_many(movies: Iterable[Movie]) -> list[dict[str, str]]:
    return [to_summary(movie) for movie in movies]


class Projection(str, Enum):
    """Output shapes a route can ask for."""

    FULL = "full"
    SUMMARY = "summary"


class ProjectionFunctions(NamedTuple):
    one: Callable[[Movie], dict[str, Any]]
    many: Callable[[Iterable[Movie]], list[dict[str, Any]]]


PROJECTIONS: dict[Projection, ProjectionFunctions] = {
    Projection.FULL: ProjectionFunctions(one=to_full, many=to_full_many),
    Projection.SUMMARY: ProjectionFunctions(one=to_summary, many=to_summary_many),
}


def render(projection: Projection, movie: Movie) -> dict[str, Any]:
    """Apply the named projection to a single movie."""
    return PROJECTIONS[projection].one(movie)


def render_many(projection: Projection, movies: Iterable[Movie]) -> list[dict[str, Any]]:
    """Apply the named projection to each movie, keeping input order."""
    return PROJECTIONS[projection].many(movies)
