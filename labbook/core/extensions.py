"""Create all standard extensions."""
import sqlite3
from typing import Any

import flask_mail
import sqlalchemy as sa
import sqlalchemy.event
from flask import current_app
from flask_login import AnonymousUserMixin, LoginManager
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect
from sqlalchemy.engine import Engine

__all__ = ("get_extension", "db", "mail", "login_manager", "csrf")


class AnonymousUser(AnonymousUserMixin):
    id = None


mail = flask_mail.Mail()

db = SQLAlchemy()

csrf = CSRFProtect()

login_manager = LoginManager()
login_manager.anonymous_user = AnonymousUser


def get_extension(name: str):
    """Get the named extension from the current app, returning None if not
    found."""
    return current_app.extensions.get(name)


#
# Make Sqlite a bit more well-behaved.
#
@sa.event.listens_for(Engine, "connect")
def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
    if isinstance(dbapi_connection, sqlite3.Connection):  # pragma: no cover
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON;")
        cursor.close()
