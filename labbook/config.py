from typing import Any, Dict

from flask import Flask
from werkzeug.datastructures import ImmutableDict


class DefaultConfig:
    # Seriously: this need to be changed in production
    SECRET_KEY = "CHANGEME"

    WTF_CSRF_ENABLED = True

    # Babel
    BABEL_ACCEPT_LANGUAGES = ["en"]
    BABEL_DEFAULT_LOCALE = "en"

    # SQLAlchemy
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # Mail
    MAIL_SENDER = "noreply@example.com"
    #: owners are notified of new comments only once mail is configured
    MAIL_NOTIFICATIONS_ENABLED = False

    # Logging
    LOG_LEVEL = None
    #: YAML (or .ini) logging config, relative to the instance folder
    LOGGING_CONFIG_FILE = None

    # labbook-specific
    SITE_NAME = "labbook"
    #: base url used in emails sent outside of a request (CLI...)
    SITE_URL = "http://localhost:5000/"
    PLUGINS = ()


default_config = dict(Flask.default_config)  # type: Dict[str, Any]
default_config.update(vars(DefaultConfig))
default_config = ImmutableDict(default_config)
