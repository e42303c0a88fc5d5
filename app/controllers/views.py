from flask import Blueprint, jsonify

from ..services.common import _store

bp = Blueprint("views", __name__)


@bp.get("/")
def home():
    store = _store()
    return jsonify(movies=len(store.movies), customers=len(store.customers))
