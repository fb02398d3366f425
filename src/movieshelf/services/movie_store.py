"""Read access to movie records."""

import logging

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from movieshelf.database import get_db
from movieshelf.exceptions import MovieNotFoundError
from movieshelf.models import Movie

logger = logging.getLogger(__name__)

# Range of the movies.id INTEGER column
MIN_MOVIE_ID = 1
MAX_MOVIE_ID = 2_147_483_647


def parse_movie_id(raw_id: int | str) -> int:
    """
    Convert a path segment to a movie id.

    Anything that cannot name a row (non-digits, signs, values outside the
    INTEGER column) is reported as a missing movie.

    Raises:
        MovieNotFoundError: If raw_id is not a usable id
    """
    if isinstance(raw_id, str):
        if not (raw_id.isascii() and raw_id.isdigit()):
            raise MovieNotFoundError(raw_id)
        movie_id = int(raw_id)
    else:
        movie_id = raw_id

    if not MIN_MOVIE_ID <= movie_id <= MAX_MOVIE_ID:
        raise MovieNotFoundError(raw_id)
    return movie_id


class MovieStore:
    """
    Fetches movies from the database.

    Lookups by id raise MovieNotFoundError for a missing record; they never
    return None.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> list[Movie]:
        """Return every movie, ordered by id."""
        result = await self.db.execute(select(Movie).order_by(Movie.id))
        movies = list(result.scalars().all())
        logger.debug(f"Loaded {len(movies)} movies")
        return movies

    async def find_by_id(self, movie_id: int | str) -> Movie:
        """
        Return the movie with the given id.

        Args:
            movie_id: Integer id, or the raw path segment from the URL

        Raises:
            MovieNotFoundError: If the id is malformed or no movie has it
        """
        movie_id = parse_movie_id(movie_id)
        movie = await self.db.get(Movie, movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        logger.debug(f"Loaded movie {movie_id}: {movie.title}")
        return movie


async def get_movie_store(db: AsyncSession = Depends(get_db)) -> MovieStore:
    """Dependency for FastAPI to provide a MovieStore bound to the request session."""
    return MovieStore(db)
