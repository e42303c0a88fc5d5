from flask import Blueprint, jsonify, request

from ..exceptions import MovieNotFoundError
from ..services.movie_service import MovieService

bp = Blueprint("movies", __name__, url_prefix="/movies")


@bp.get("")
def list_movies():
    return jsonify(MovieService.all_movies())


@bp.post("")
def add_movie():
    """Create a movie from form fields 'title' and 'price_code'."""
    ok, msg, mid = MovieService.create_movie(
        title=request.form.get("title"),
        price_code=request.form.get("price_code"),
    )
    if not ok:
        return jsonify(error=msg), 400
    return jsonify(movie_id=mid, message=msg), 201


@bp.get("/<mid>")
def movie_detail(mid):
    try:
        movie = MovieService.get_movie(mid)
    except MovieNotFoundError as e:
        return jsonify(error=e.message), 404
    return jsonify(movie_id=mid, title=movie.title, price_code=movie.price_code)


@bp.post("/<mid>/price")
def reprice_movie(mid):
    """Re-tag a movie, e.g. new_release -> regular once it leaves the new shelf."""
    try:
        MovieService.get_movie(mid)
    except MovieNotFoundError as e:
        return jsonify(error=e.message), 404

    ok, msg = MovieService.reprice(mid, request.form.get("price_code"))
    if not ok:
        return jsonify(error=msg), 400
    return jsonify(message=msg)
