"""Movie model."""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from movieshelf.models.base import Base, TimestampMixin


class Movie(Base, TimestampMixin):
    """
    Movie record.

    Read-only from the API's point of view: rows come from migrations and
    the seed script.
    """

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    length: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes
    director: Mapped[str | None] = mapped_column(String(200), nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    poster_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    discount: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    female_director: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<Movie(id={self.id!r}, title={self.title!r}, year={self.year})>"
