import threading
import uuid

from .customer import Customer
from .movie import Movie
from .pricing import PricingPolicy


class Store:
    """
    In-memory catalog of movies and customers.
    Movies are shared: any number of customers' rentals may point at the
    same Movie. Nothing is persisted; the catalog lives as long as the process.
    """
    _inst = None
    _inst_lock = threading.Lock()

    def __init__(self):
        self.movies: dict[str, Movie] = {}
        self.customers: dict[str, Customer] = {}
        self._rw = threading.RLock()

        print("[Store] Using in-memory catalog")

    # ---------- Singleton ----------
    @classmethod
    def instance(cls):
        """Return the global singleton instance of Store."""
        with cls._inst_lock:
            if cls._inst is None:
                cls._inst = Store()
        return cls._inst

    def clear(self):
        """Drop every movie and customer."""
        with self._rw:
            self.movies.clear()
            self.customers.clear()
            print("[Store] Cleared catalog")

    # ---------- Movies ----------
    def create_movie(self, title: str, price: PricingPolicy) -> str:
        """Create a new movie and return its ID."""
        with self._rw:
            mid = str(uuid.uuid4())
            self.movies[mid] = Movie(title, price)
            return mid

    def get_movie(self, movie_id: str) -> Movie | None:
        """Get a movie by ID."""
        return self.movies.get(str(movie_id))

    def find_movie(self, title: str) -> tuple[str, Movie] | None:
        """Find a movie by title; returns (movie_id, movie)."""
        for mid, m in self.movies.items():
            if m.title == title:
                return mid, m
        return None

    # ---------- Customers ----------
    def customer_exists(self, name: str) -> bool:
        """Return True if a customer with this name already exists."""
        return any(c.name == name for c in self.customers.values())

    def find_customer(self, name: str) -> tuple[str, Customer] | None:
        """Find a customer by name; returns (customer_id, customer)."""
        for cid, c in self.customers.items():
            if c.name == name:
                return cid, c
        return None

    def create_customer(self, name: str) -> str:
        """Create a new customer and return its ID."""
        with self._rw:
            if self.customer_exists(name):
                raise ValueError("Customer already exists")
            cid = str(uuid.uuid4())
            self.customers[cid] = Customer(name)
            return cid

    def get_customer(self, customer_id: str) -> Customer | None:
        """Get a customer by ID."""
        return self.customers.get(str(customer_id))
