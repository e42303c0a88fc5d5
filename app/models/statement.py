"""
Statement formatters.

Both formats share the same skeleton: a header, one line per rental in the
order the rentals were added, then the footer lines. Output is joined with
newlines and has no trailing newline.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from markupsafe import escape

from ..utils.constants import StatementFormat
from ..utils.filters import fmt_amount

if TYPE_CHECKING:
    from .customer import Customer
    from .rental import Rental


class Statement:
    """Base formatter. Subclasses supply the header, line and footer text."""

    def __init__(self, customer: "Customer") -> None:
        self.customer = customer

    def render(self) -> str:
        lines = [self.header()]
        lines.extend(self.line(r) for r in self.customer.rentals)
        lines.extend(self.footer())
        return "\n".join(lines)

    def header(self) -> str:
        raise NotImplementedError

    def line(self, rental: "Rental") -> str:
        raise NotImplementedError

    def footer(self) -> list[str]:
        raise NotImplementedError


class TextStatement(Statement):
    def header(self) -> str:
        return f"Rental Record for {self.customer.name}"

    def line(self, rental: "Rental") -> str:
        return f"\t{rental.movie.title}\t{fmt_amount(rental.charge())}"

    def footer(self) -> list[str]:
        return [
            f"Amount owed is {fmt_amount(self.customer.total_charge())}",
            f"You earned {self.customer.total_loyalty_points()} frequent renter points",
        ]


class HtmlStatement(Statement):
    """HTML flavour; names and titles are escaped."""

    def header(self) -> str:
        return f"<h1>Rentals for <em>{escape(self.customer.name)}</em></h1><p>"

    def line(self, rental: "Rental") -> str:
        return f"\t{escape(rental.movie.title)}: {fmt_amount(rental.charge())}<br>"

    def footer(self) -> list[str]:
        return [
            f"<p>You owe <em>{fmt_amount(self.customer.total_charge())}</em></p>",
            "On this rental you earned "
            f"<em>{self.customer.total_loyalty_points()}</em> "
            "frequent renter points</p>",
        ]


FORMATTERS: dict[str, type[Statement]] = {
    StatementFormat.TEXT: TextStatement,
    StatementFormat.HTML: HtmlStatement,
}
