"""
Pricing policies for movie rentals.

A policy maps a rental length (in days) to a charge and to frequent renter
points. Policies hold no per-instance state, so one shared instance per
variant is enough; movies point at these and can be re-tagged at any time.
"""
from __future__ import annotations

from typing import Protocol, Union

from ..exceptions import UnknownPriceCodeError
from ..utils.constants import PriceCode

Amount = Union[int, float]


class PricingPolicy(Protocol):
    code: str

    def charge(self, days: int) -> Amount:
        ...

    def loyalty_points(self, days: int) -> int:
        ...


class DefaultLoyaltyPoints:
    """One frequent renter point per rental, whatever its length."""

    def __call__(self, days: int) -> int:
        return 1


class RegularPrice:
    """
    2 for the first two days, then 1.5 per extra day.
    The result stays an int unless the extra-day tier kicks in.
    """
    code = PriceCode.REGULAR

    def __init__(self, points: DefaultLoyaltyPoints | None = None) -> None:
        self._points = points or DefaultLoyaltyPoints()

    def charge(self, days: int) -> Amount:
        result = 2
        if days > 2:
            result += (days - 2) * 1.5
        return result

    def loyalty_points(self, days: int) -> int:
        return self._points(days)


class NewReleasePrice:
    """
    Flat 3 per day. Rentals longer than one day earn a bonus point.
    """
    code = PriceCode.NEW_RELEASE

    def charge(self, days: int) -> Amount:
        return days * 3

    def loyalty_points(self, days: int) -> int:
        return 2 if days > 1 else 1


class ChildrensPrice:
    """
    1.5 for the first three days, then 1.5 per extra day.
    """
    code = PriceCode.CHILDRENS

    def __init__(self, points: DefaultLoyaltyPoints | None = None) -> None:
        self._points = points or DefaultLoyaltyPoints()

    def charge(self, days: int) -> Amount:
        result = 1.5
        if days > 3:
            result += (days - 3) * 1.5
        return result

    def loyalty_points(self, days: int) -> int:
        return self._points(days)


# Shared instances, one per variant
REGULAR = RegularPrice()
NEW_RELEASE = NewReleasePrice()
CHILDRENS = ChildrensPrice()

POLICIES: dict[str, PricingPolicy] = {
    REGULAR.code: REGULAR,
    NEW_RELEASE.code: NEW_RELEASE,
    CHILDRENS.code: CHILDRENS,
}


def policy_for_code(code: str | None) -> PricingPolicy:
    """Resolve a price code like 'new_release' to its shared policy."""
    key = (code or "").strip().lower()
    try:
        return POLICIES[key]
    except KeyError:
        raise UnknownPriceCodeError(f"Error: unknown price code {code!r}") from None
