"""Customer-facing service layer: rentals and statements."""

from __future__ import annotations

from app.exceptions import CustomerNotFoundError, UnsupportedStatementFormatError
from app.models.customer import Customer
from app.models.rental import Rental
from app.models.statement import FORMATTERS
from app.services import common
from app.services.movie_service import MovieService
from app.utils.constants import StatementFormat


class CustomerService:
    """
    Customers, their rentals, and statement rendering.
    Charges and points come from each movie's current pricing policy.
    """

    @staticmethod
    def create_customer(name: str):
        """
        Returns:
            (ok: bool, message: str, customer_id: Optional[str])
        """
        name = (name or "").strip()
        if not name:
            return False, "Name is required", None
        try:
            cid = common._store().create_customer(name)
        except ValueError:
            return False, "Customer exists", None
        return True, "Customer created", cid

    @staticmethod
    def get_customer(customer_id: str) -> Customer:
        customer = common._store().get_customer(customer_id)
        if customer is None:
            raise CustomerNotFoundError()
        return customer

    @staticmethod
    def all_customers():
        store = common._store()
        out = [{"customer_id": cid, "name": c.name, "rentals": len(c.rentals)}
               for cid, c in store.customers.items()]
        out.sort(key=lambda x: x["name"].lower())
        return out

    @staticmethod
    def add_rental(customer_id: str, movie_id: str, days):
        """
        Append a rental of `movie_id` for `days` to the customer's record.
        - days must be a whole number; zero and negative values are accepted
        - the rental references the catalog movie, it does not copy it
        - unknown ids raise CustomerNotFoundError / MovieNotFoundError

        Returns:
            (ok: bool, message: str)
        """
        customer = CustomerService.get_customer(customer_id)
        movie = MovieService.get_movie(movie_id)

        n = common.to_int_safe(days)
        if n is None:
            return False, "Days rented must be a whole number"

        customer.add_rental(Rental(movie, n))
        return True, "Rental added"

    @staticmethod
    def statement(customer_id: str, fmt: str = StatementFormat.TEXT) -> str:
        customer = CustomerService.get_customer(customer_id)
        return CustomerService._render(customer, fmt)

    @staticmethod
    def summary(customer_id: str) -> dict:
        return CustomerService.get_customer(customer_id).summary()

    @staticmethod
    def statements_for_all(fmt: str = StatementFormat.TEXT) -> dict[str, str]:
        """Statement per customer name. Customers share no mutable state."""
        store = common._store()
        return {c.name: CustomerService._render(c, fmt) for c in store.customers.values()}

    @staticmethod
    def _render(customer: Customer, fmt: str) -> str:
        formatter = FORMATTERS.get((fmt or "").strip().lower())
        if formatter is None:
            raise UnsupportedStatementFormatError(f"Error: unsupported statement format {fmt!r}")
        return formatter(customer).render()
