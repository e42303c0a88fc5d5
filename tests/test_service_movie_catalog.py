"""
Unit tests for MovieService: creation, lookup, listing and re-pricing.
Pure service-layer tests against the per-test Store.
"""

import pytest

from app.exceptions import MovieNotFoundError
from app.models.pricing import NEW_RELEASE, REGULAR
from app.services.movie_service import MovieService


def test_create_and_get_movie(fresh_store):
    ok, msg, mid = MovieService.create_movie("Avatar", "new_release")
    assert ok, msg
    assert mid in fresh_store.movies
    movie = MovieService.get_movie(mid)
    assert movie.title == "Avatar"
    assert movie.price is NEW_RELEASE


def test_create_rejects_blank_title():
    ok, msg, mid = MovieService.create_movie("   ", "regular")
    assert not ok and mid is None
    assert "title" in msg.lower()


def test_create_rejects_unknown_code(fresh_store):
    ok, msg, mid = MovieService.create_movie("Avatar", "premium")
    assert not ok and mid is None
    assert "price code" in msg
    assert not fresh_store.movies


def test_get_missing_movie_raises():
    with pytest.raises(MovieNotFoundError):
        MovieService.get_movie("nope")


def test_all_movies_sorted_by_title():
    MovieService.create_movie("encanto", "childrens")
    MovieService.create_movie("Avatar", "new_release")
    rows = MovieService.all_movies()
    assert [r["title"] for r in rows] == ["Avatar", "encanto"]
    assert rows[0]["price_code"] == "new_release"


def test_reprice_movie():
    _, _, mid = MovieService.create_movie("Avatar", "new_release")
    ok, msg = MovieService.reprice(mid, "  REGULAR ")
    assert ok, msg
    assert MovieService.get_movie(mid).price is REGULAR


def test_reprice_rejects_bad_input():
    _, _, mid = MovieService.create_movie("Avatar", "new_release")
    ok, msg = MovieService.reprice(mid, "bogus")
    assert not ok
    assert MovieService.get_movie(mid).price is NEW_RELEASE

    ok, msg = MovieService.reprice("missing", "regular")
    assert not ok and "not found" in msg
