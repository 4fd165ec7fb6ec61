""""""
from flask import Flask

from .views import bp as blueprint


def register_plugin(app: Flask) -> None:
    app.register_blueprint(blueprint)
