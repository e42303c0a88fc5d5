from __future__ import annotations

from .pricing import Amount
from .rental import Rental
from .statement import HtmlStatement, TextStatement


class Customer:
    """
    A named customer and the rentals they have taken out, in order.
    Rentals are append-only; totals and statements are computed on demand.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._rentals: list[Rental] = []

    def __repr__(self) -> str:
        return f"Customer(name={self._name!r}, rentals={len(self._rentals)})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def rentals(self) -> tuple[Rental, ...]:
        return tuple(self._rentals)

    def add_rental(self, rental: Rental) -> None:
        self._rentals.append(rental)

    def total_charge(self) -> Amount:
        return sum((r.charge() for r in self._rentals), 0)

    def total_loyalty_points(self) -> int:
        return sum((r.loyalty_points() for r in self._rentals), 0)

    def statement(self) -> str:
        return TextStatement(self).render()

    def html_statement(self) -> str:
        return HtmlStatement(self).render()

    def summary(self) -> dict:
        """Structured view of the statement figures (used by the JSON API)."""
        return {
            "name": self._name,
            "rentals": [
                {
                    "title": r.movie.title,
                    "price_code": r.movie.price_code,
                    "days_rented": r.days_rented,
                    "charge": r.charge(),
                    "points": r.loyalty_points(),
                }
                for r in self._rentals
            ],
            "total_charge": self.total_charge(),
            "total_points": self.total_loyalty_points(),
        }
