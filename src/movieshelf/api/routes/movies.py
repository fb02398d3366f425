"""Movie API endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from movieshelf.schemas import ErrorResponse, MovieResponse, MovieSummaryResponse
from movieshelf.serializers.movie import Projection, render, render_many
from movieshelf.services.movie_store import MovieStore, get_movie_store

router = APIRouter()

NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Movie not found"},
}


@router.get("/movies", response_model=list[MovieResponse])
async def list_movies(
    store: MovieStore = Depends(get_movie_store),
) -> list[dict[str, Any]]:
    """Get every movie with all public fields."""
    movies = await store.find_all()
    return render_many(Projection.FULL, movies)


@router.get(
    "/movies/{movie_id}",
    response_model=MovieResponse,
    responses=NOT_FOUND_RESPONSE,
)
async def get_movie(
    movie_id: str,
    store: MovieStore = Depends(get_movie_store),
) -> dict[str, Any]:
    """
    Get a single movie.

    Args:
        movie_id: Movie primary key as given in the URL
        store: Movie store bound to the request session

    Returns:
        Movie with all public fields
    """
    movie = await store.find_by_id(movie_id)
    return render(Projection.FULL, movie)


@router.get(
    "/movies/{movie_id}/summary",
    response_model=MovieSummaryResponse,
    responses=NOT_FOUND_RESPONSE,
)
async def get_movie_summary(
    movie_id: str,
    store: MovieStore = Depends(get_movie_store),
) -> dict[str, Any]:
    """Get the one-line summary of a single movie."""
    movie = await store.find_by_id(movie_id)
    return render(Projection.SUMMARY, movie)


@router.get("/movie_summaries", response_model=list[MovieSummaryResponse])
async def list_movie_summaries(
    store: MovieStore = Depends(get_movie_store),
) -> list[dict[str, Any]]:
    """Get the one-line summary of every movie, ordered by id."""
    movies = await store.find_all()
    return render_many(Projection.SUMMARY, movies)
