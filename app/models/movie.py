from __future__ import annotations

from .pricing import Amount, PricingPolicy, policy_for_code


class Movie:
    """
    A title in the catalog plus its current pricing policy.
    The movie does no pricing itself; it dispatches to whatever policy it
    holds at call time.
    """

    def __init__(self, title: str, price: PricingPolicy) -> None:
        self._title = title
        self.price = price

    def __repr__(self) -> str:
        return f"Movie(title={self._title!r}, price_code={self.price_code!r})"

    @property
    def title(self) -> str:
        return self._title

    @property
    def price(self) -> PricingPolicy:
        return self._price

    @price.setter
    def price(self, value: PricingPolicy) -> None:
        if value is None:
            raise ValueError("Movie requires a pricing policy")
        self._price = value

    @property
    def price_code(self) -> str:
        return self._price.code

    @price_code.setter
    def price_code(self, code: str) -> None:
        """Re-tag the movie by code, e.g. when a new release goes regular."""
        self.price = policy_for_code(code)

    def charge(self, days_rented: int) -> Amount:
        return self._price.charge(days_rented)

    def loyalty_points(self, days_rented: int) -> int:
        return self._price.loyalty_points(days_rented)
