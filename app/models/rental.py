from dataclasses import dataclass

from .movie import Movie
from .pricing import Amount


@dataclass(frozen=True)
class Rental:
    """
    One movie rented for a number of days.
    The movie is shared with other rentals; its policy is read on every call,
    so re-pricing the movie changes what this rental charges.
    """
    movie: Movie
    days_rented: int  # zero and negative values are accepted as-is

    def charge(self) -> Amount:
        return self.movie.charge(self.days_rented)

    def loyalty_points(self) -> int:
        return self.movie.loyalty_points(self.days_rented)
