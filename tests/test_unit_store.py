import pytest

from app.models.pricing import REGULAR
from app.models.store import Store


def test_instance_is_singleton(fresh_store):
    assert Store.instance() is fresh_store
    assert Store.instance() is Store.instance()


def test_movies_and_customers(fresh_store):
    mid = fresh_store.create_movie("The Mask", REGULAR)
    assert fresh_store.get_movie(mid).title == "The Mask"
    assert fresh_store.get_movie("missing") is None

    cid = fresh_store.create_customer("Zak")
    assert fresh_store.customer_exists("Zak")
    assert fresh_store.find_customer("Zak") == (cid, fresh_store.get_customer(cid))
    assert fresh_store.find_customer("Tom") is None

    with pytest.raises(ValueError):
        fresh_store.create_customer("Zak")


def test_clear(fresh_store):
    fresh_store.create_movie("The Mask", REGULAR)
    fresh_store.create_customer("Zak")
    fresh_store.clear()
    assert not fresh_store.movies
    assert not fresh_store.customers


def test_find_movie(fresh_store):
    mid = fresh_store.create_movie("The Mask", REGULAR)
    assert fresh_store.find_movie("The Mask") == (mid, fresh_store.get_movie(mid))
    assert fresh_store.find_movie("Avatar") is None
