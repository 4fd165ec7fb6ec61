"""Configuration and injectable fixtures for Pytest.

Can be reused (and overriden) by adding::

   pytest_plugins = ['labbook.testing.fixtures']

to your `conftest.py`.
"""
from typing import Any, Iterator

from flask import Flask
from flask.ctx import AppContext, RequestContext
from flask.testing import FlaskClient
from flask_sqlalchemy import SQLAlchemy
from pytest import fixture
from sqlalchemy.orm import Session

from labbook.app import create_app
from labbook.core.models import Experiment, Item, User
from labbook.testing.util import ensure_services_started, stop_all_services


class TestConfig:
    TESTING = True
    DEBUG = True
    SECRET_KEY = "SECRET"
    SERVER_NAME = "localhost.localdomain"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    MAIL_SENDER = "tester@example.com"
    MAIL_NOTIFICATIONS_ENABLED = True
    SITE_NAME = "Labbook Test"
    SITE_URL = "https://labbook.example.com/"
    WTF_CSRF_ENABLED = False
    BABEL_ACCEPT_LANGUAGES = ["en", "fr"]


@fixture
def config() -> type:
    return TestConfig


@fixture
def app(config: Any) -> Flask:
    # A fresh app for each test.
    return create_app(config=config)


@fixture
def app_context(app: Flask) -> Iterator[AppContext]:
    with app.app_context() as ctx:
        yield ctx


@fixture
def req_ctx(app: Flask) -> Iterator[RequestContext]:
    with app.test_request_context() as _req_ctx:
        yield _req_ctx


@fixture
def db(app_context: AppContext) -> Iterator[SQLAlchemy]:
    """Return a fresh db for each test."""
    from labbook.core.extensions import db

    stop_all_services(app_context.app)
    ensure_services_started(["auth", "mailer", "comments"])

    db.create_all()
    yield db

    db.session.remove()
    db.drop_all()
    stop_all_services(app_context.app)


@fixture
def session(db: SQLAlchemy) -> Session:
    return db.session


@fixture
def client(app: Flask) -> FlaskClient:
    """Return a Web client, used for testing."""
    return app.test_client()


# Data created by the fixtures below is committed: a failing request rolls
# back the session.
@fixture
def user(db: SQLAlchemy) -> User:
    user = User(
        first_name="Joe",
        last_name="Test",
        email="test@example.com",
        password="test",
    )
    db.session.add(user)
    db.session.commit()
    return user


@fixture
def other_user(db: SQLAlchemy) -> User:
    user = User(
        first_name="Jim",
        last_name="Other",
        email="other@example.com",
        password="other",
    )
    db.session.add(user)
    db.session.commit()
    return user


@fixture
def experiment(db: SQLAlchemy, user: User) -> Experiment:
    """An experiment owned by `user`."""
    experiment = Experiment(title="Western blot", owner=user)
    db.session.add(experiment)
    db.session.commit()
    return experiment


@fixture
def item(db: SQLAlchemy, user: User) -> Item:
    """A database item owned by `user`."""
    item = Item(title="Anti-GFP antibody", owner=user)
    db.session.add(item)
    db.session.commit()
    return item


@fixture
def login_user(user: User, client: FlaskClient) -> User:
    with client.session_transaction() as session:
        session["_user_id"] = user.id

    return user


@fixture
def login_other_user(other_user: User, client: FlaskClient) -> User:
    with client.session_transaction() as session:
        session["_user_id"] = other_user.id

    return other_user
