"""Seed script to populate sample movie data."""

import asyncio
import logging

from sqlalchemy import select

from movieshelf.config import settings
from movieshelf.database import AsyncSessionLocal
from movieshelf.logging_config import setup_logging
from movieshelf.models import Movie

logger = logging.getLogger(__name__)

MOVIES_DATA = [
    {
        "title": "The Color Purple",
        "year": 1985,
        "length": 154,
        "director": "Steven Spielberg",
        "description": (
            "Whoopi Goldberg brings Alice Walker's Pulitzer Prize-winning feminist "
            "novel to life as Celie, a Southern woman who suffered abuse over decades."
        ),
        "poster_url": "https://m.media-amazon.com/images/M/MV5BZDRkOWQ5NGUtYTVmOS00ZjNhLWEwODgtOGI2MmUxNTBiMTU1XkEyXkFqcGdeQXVyMjUzOTY1NTc@._V1_.jpg",
        "category": "Drama",
        "discount": False,
        "female_director": False,
    },
    {
        "title": "Lady Bird",
        "year": 2017,
        "length": 94,
        "director": "Greta Gerwig",
        "description": (
            "A nurse in Sacramento and her headstrong teenage daughter clash "
            "through the girl's final year of Catholic high school."
        ),
        "poster_url": "https://m.media-amazon.com/images/M/MV5BODhkZGE0NDQtZDc0Zi00YmQ4LWJiNmUtYTY1OGM1ODRmNGVkXkEyXkFqcGdeQXVyMTMxODk2OTU@._V1_.jpg",
        "category": "Comedy",
        "discount": True,
        "female_director": True,
    },
    {
        "title": "Selma",
        "year": 2014,
        "length": 128,
        "director": "Ava DuVernay",
        "description": "The 1965 marches from Selma to Montgomery.",
        "poster_url": "https://m.media-amazon.com/images/M/MV5BODMxNjAwODA1Ml5BMl5BanBnXkFtZTgwMTk5MDU3MzE@._V1_.jpg",
        "category": "History",
        "discount": False,
        "female_director": True,
    },
]


async def seed_movies() -> int:
    """
    Seed the database with sample movies.

    Movies already present (matched by title and year) are skipped, so the
    script can be re-run safely.

    Returns:
        Number of movies added
    """
    added = 0
    async with AsyncSessionLocal() as session:
        for movie_data in MOVIES_DATA:
            query = select(Movie).where(
                Movie.title == movie_data["title"],
                Movie.year == movie_data["year"],
            )
            result = await session.execute(query)
            if result.scalar_one_or_none() is not None:
                logger.info(f"Movie {movie_data['title']!r} already exists, skipping")
                continue

            session.add(Movie(**movie_data))
            added += 1
            logger.info(f"Added movie: {movie_data['title']}")

        await session.commit()

    logger.info(f"Movie seeding complete ({added} added)")
    return added


def main() -> None:
    setup_logging(settings.log_level)
    asyncio.run(seed_movies())


if __name__ == "__main__":
    main()
