"""Application exceptions."""


class MovieshelfError(Exception):
    """Base class for errors raised by the application."""


class MovieNotFoundError(MovieshelfError):
    """Raised when a movie id does not exist in the store."""

    def __init__(self, movie_id: int | str) -> None:
        self.movie_id = movie_id
        super().__init__(f"Movie {movie_id!r} not found")
