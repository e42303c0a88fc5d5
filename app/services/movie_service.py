from __future__ import annotations

from app.exceptions import MovieNotFoundError, UnknownPriceCodeError
from app.models.movie import Movie
from app.models.pricing import policy_for_code
from app.services import common


class MovieService:
    """Movie catalogue: create, look up, list, and re-price."""

    @staticmethod
    def create_movie(title: str, price_code: str):
        """
        Add a movie priced under the given code.

        Returns:
            (ok: bool, message: str, movie_id: Optional[str])
        """
        title = (title or "").strip()
        if not title:
            return False, "Title is required", None
        try:
            policy = policy_for_code(price_code)
        except UnknownPriceCodeError as e:
            return False, e.message, None
        mid = common._store().create_movie(title, policy)
        return True, "Movie created", mid

    @staticmethod
    def get_movie(movie_id: str) -> Movie:
        movie = common._store().get_movie(movie_id)
        if movie is None:
            raise MovieNotFoundError()
        return movie

    @staticmethod
    def all_movies():
        store = common._store()
        out = [common.movie_row(mid, m) for mid, m in store.movies.items()]
        out.sort(key=lambda x: x["title"].lower())
        return out

    @staticmethod
    def reprice(movie_id: str, price_code: str):
        """
        Re-tag a movie with another pricing policy.
        Existing rentals of this movie pick up the new policy on their next
        charge/points computation.
        """
        try:
            movie = MovieService.get_movie(movie_id)
        except MovieNotFoundError as e:
            return False, e.message
        try:
            movie.price_code = price_code
        except UnknownPriceCodeError as e:
            return False, e.message
        return True, "Movie re-priced"
