"""Exception handlers that turn application errors into JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from movieshelf.exceptions import MovieNotFoundError

logger = logging.getLogger(__name__)

MOVIE_NOT_FOUND_MESSAGE = "Movie not found"


async def movie_not_found_handler(request: Request, exc: MovieNotFoundError) -> JSONResponse:
    logger.info(f"Movie {exc.movie_id} not found ({request.method} {request.url.path})")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": MOVIE_NOT_FOUND_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the application's exception handlers on a FastAPI app."""
    app.add_exception_handler(MovieNotFoundError, movie_not_found_handler)
