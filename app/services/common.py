"""Shared service helpers."""

from typing import Optional

from app.models.store import Store


def _store() -> Store:
    """Get the singleton store instance."""
    return Store.instance()


def to_int_safe(value) -> Optional[int]:
    """
    Safely convert to int; return None if invalid.
    Accepts ints and whole-number strings such as '7' or '-2'; rejects '2.5'.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def movie_row(movie_id: str, movie) -> dict:
    """Flatten a movie into a plain dict for listings."""
    return {
        "movie_id": movie_id,
        "title": movie.title,
        "price_code": movie.price_code,
    }
