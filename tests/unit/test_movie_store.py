"""Unit tests for MovieStore."""

import pytest
from factories import make_movie, make_session

from movieshelf.exceptions import MovieNotFoundError
from movieshelf.models import Movie
from movieshelf.services.movie_store import MAX_MOVIE_ID, MovieStore, get_movie_store


async def test_find_all_returns_every_movie() -> None:
    movies = [make_movie(id=1), make_movie(id=2, title="Selma")]
    store = MovieStore(make_session(movies))

    assert await store.find_all() == movies


async def test_find_all_orders_by_id() -> None:
    db = make_session([])
    await MovieStore(db).find_all()

    stmt = db.execute.await_args.args[0]
    assert "ORDER BY movies.id" in str(stmt)


async def test_find_all_with_empty_table() -> None:
    assert await MovieStore(make_session([])).find_all() == []


async def test_find_by_id_returns_movie() -> None:
    movie = make_movie(id=5)
    db = make_session([movie])

    assert await MovieStore(db).find_by_id(5) is movie
    db.get.assert_awaited_once_with(Movie, 5)


async def test_find_by_id_raises_when_missing() -> None:
    store = MovieStore(make_session([make_movie(id=1)]))

    with pytest.raises(MovieNotFoundError) as exc_info:
        await store.find_by_id(99)

    assert exc_info.value.movie_id == 99
    assert "99" in str(exc_info.value)


async def test_get_movie_store_wraps_session() -> None:
    db = make_session([])
    store = await get_movie_store(db)

    assert isinstance(store, MovieStore)
    assert store.db is db


async def test_find_by_id_accepts_numeric_path_segment() -> None:
    movie = make_movie(id=12)
    db = make_session([movie])

    assert await MovieStore(db).find_by_id("12") is movie
    db.get.assert_awaited_once_with(Movie, 12)


@pytest.mark.parametrize("raw_id", ["abc", "12abc", "-1", "+5", "1.5", "", "٣"])
async def test_find_by_id_treats_malformed_id_as_missing(raw_id: str) -> None:
    db = make_session([make_movie(id=1)])

    with pytest.raises(MovieNotFoundError):
        await MovieStore(db).find_by_id(raw_id)

    db.get.assert_not_awaited()


@pytest.mark.parametrize("raw_id", [0, 2_147_483_648, "0", "99999999999999999999"])
async def test_find_by_id_treats_out_of_range_id_as_missing(raw_id: int | str) -> None:
    db = make_session([make_movie(id=1)])

    with pytest.raises(MovieNotFoundError):
        await MovieStore(db).find_by_id(raw_id)

    db.get.assert_not_awaited()


async def test_find_by_id_accepts_largest_column_value() -> None:
    movie = make_movie(id=MAX_MOVIE_ID)

    assert await MovieStore(make_session([movie])).find_by_id(str(MAX_MOVIE_ID)) is movie
