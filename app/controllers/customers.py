from flask import Blueprint, Response, jsonify, request

from ..exceptions import CustomerNotFoundError, MovieNotFoundError
from ..services.customer_service import CustomerService
from ..utils.constants import StatementFormat

bp = Blueprint("customers", __name__, url_prefix="/customers")


@bp.errorhandler(CustomerNotFoundError)
def customer_not_found(e):
    return jsonify(error=e.message), 404


@bp.get("")
def list_customers():
    return jsonify(CustomerService.all_customers())


@bp.post("")
def add_customer():
    ok, msg, cid = CustomerService.create_customer(request.form.get("name"))
    if not ok:
        return jsonify(error=msg), 400
    return jsonify(customer_id=cid, message=msg), 201


@bp.post("/<cid>/rentals")
def add_rental(cid):
    """Rent a catalog movie for this customer (form: movie_id, days)."""
    try:
        ok, msg = CustomerService.add_rental(
            customer_id=cid,
            movie_id=(request.form.get("movie_id") or "").strip(),
            days=request.form.get("days"),
        )
    except (CustomerNotFoundError, MovieNotFoundError) as e:
        return jsonify(error=e.message), 404
    if not ok:
        return jsonify(error=msg), 400
    return jsonify(message=msg), 201


@bp.get("/<cid>/statement")
def text_statement(cid):
    body = CustomerService.statement(cid, StatementFormat.TEXT)
    return Response(body, mimetype="text/plain")


@bp.get("/<cid>/statement.html")
def html_statement(cid):
    body = CustomerService.statement(cid, StatementFormat.HTML)
    return Response(body, mimetype="text/html")


@bp.get("/<cid>/summary")
def summary(cid):
    return jsonify(CustomerService.summary(cid))
