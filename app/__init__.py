from flask import Flask

from .controllers.customers import bp as customers_bp
from .controllers.movies import bp as movies_bp
from .controllers.views import bp as views_bp
from .models.store import Store


def create_app():
    app = Flask(__name__)
    Store.instance()  # in-memory catalog, empty until seeded
    app.register_blueprint(views_bp)
    app.register_blueprint(movies_bp)
    app.register_blueprint(customers_bp)

    return app
