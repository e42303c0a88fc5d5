from app import create_app
from app.models.movie import Movie
from app.models.pricing import CHILDRENS, NEW_RELEASE, REGULAR
from app.models.rental import Rental
from app.models.store import Store


def ensure_movie(store: Store, title: str, price) -> Movie:
    """
    Ensure a movie titled `title` exists in the store (idempotent).
    An existing movie keeps its current pricing policy.
    """
    found = store.find_movie(title)
    if found:
        return found[1]
    return store.get_movie(store.create_movie(title, price))


def ensure_customer(store: Store, name: str):
    """
    Ensure a customer named `name` exists in the store (idempotent).
    Returns (customer_id, customer, created).
    """
    found = store.find_customer(name)
    if found:
        return found[0], found[1], False
    cid = store.create_customer(name)
    return cid, store.get_customer(cid), True


def seed_demo(store: Store) -> dict[str, str]:
    """
    Load the demo catalog: three movies, one per pricing policy, and three
    customers renting them. Returns {customer name: customer_id}.
    Movies and customers that already exist are left untouched.
    """
    mask = ensure_movie(store, "The Mask", REGULAR)
    avatar = ensure_movie(store, "Avatar", NEW_RELEASE)
    encanto = ensure_movie(store, "Encanto", CHILDRENS)

    plan = {
        "Zak": [(mask, 10), (avatar, 134), (encanto, 1)],
        "Tom": [(mask, 1), (avatar, 1), (encanto, 2)],
        # zero and negative durations are accepted as-is
        "Amy": [(mask, 5), (avatar, 0), (encanto, -19)],
    }

    ids = {}
    for name, rentals in plan.items():
        cid, customer, created = ensure_customer(store, name)
        if created:
            for movie, days in rentals:
                customer.add_rental(Rental(movie, days))
        ids[name] = cid
    return ids


def main():
    app = create_app()
    with app.app_context():
        store = Store.instance()
        seed_demo(store)

        print("✅ Seed complete.")
        for customer in store.customers.values():
            print()
            print(customer.statement())


if __name__ == "__main__":
    main()
