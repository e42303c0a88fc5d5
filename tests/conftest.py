import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from app import create_app
from app.models.pricing import CHILDRENS, NEW_RELEASE, REGULAR
from app.models.movie import Movie
from app.models.rental import Rental
from app.models.customer import Customer


@pytest.fixture(autouse=True)
def fresh_store(monkeypatch):
    """
    Swap in a brand-new Store singleton for every test so catalog state never
    leaks between tests. Services reach it through common._store().
    """
    from app.models.store import Store

    store = Store()
    monkeypatch.setattr(Store, "_inst", store)
    yield store


@pytest.fixture
def movies():
    return {
        "regular": Movie("The Mask", REGULAR),
        "new_release": Movie("Avatar", NEW_RELEASE),
        "childrens": Movie("Encanto", CHILDRENS),
    }


@pytest.fixture
def zak(movies):
    c = Customer("Zak")
    c.add_rental(Rental(movies["regular"], 10))
    c.add_rental(Rental(movies["new_release"], 134))
    c.add_rental(Rental(movies["childrens"], 1))
    return c


@pytest.fixture
def tom(movies):
    c = Customer("Tom")
    c.add_rental(Rental(movies["regular"], 1))
    c.add_rental(Rental(movies["new_release"], 1))
    c.add_rental(Rental(movies["childrens"], 2))
    return c


@pytest.fixture
def amy(movies):
    c = Customer("Amy")
    c.add_rental(Rental(movies["regular"], 5))
    c.add_rental(Rental(movies["new_release"], 0))
    c.add_rental(Rental(movies["childrens"], -19))
    return c


@pytest.fixture
def client():
    app = create_app()
    app.config.update(TESTING=True)
    with app.test_client() as c:
        yield c
