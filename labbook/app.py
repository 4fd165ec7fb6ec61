"""Base Flask application class, used by tests or to be extended in real
applications."""
import importlib
import logging
import sys
from itertools import chain
from typing import Any, Dict, Optional

import sqlalchemy as sa
import sqlalchemy.orm
from flask import Flask
from flask.config import Config

import labbook.i18n
from labbook.config import default_config
from labbook.core import extensions, signals
from labbook.services import Service, auth_service, comments_service, \
    mail_service
from labbook.web.errors import ErrorManagerMixin

logger = logging.getLogger(__name__)
db = extensions.db
__all__ = ["create_app", "Application", "ServiceManager"]


class ServiceManager:
    """Mixin that provides lifecycle (register/start/stop) support for
    services."""

    services: Dict[str, Service]

    def __init__(self) -> None:
        self.services = {}

    def start_services(self):
        for svc in self.services.values():
            if not svc.running:
                svc.start()

    def stop_services(self):
        for svc in self.services.values():
            if svc.running:
                svc.stop()


class PluginManager:
    """Mixin that provides support for loading plugins."""

    config: Config

    #: Custom apps may want to always load some plugins: list them here.
    APP_PLUGINS = ("labbook.web.comments",)

    def register_plugin(self, name: str) -> None:
        """Load and register a plugin given its package name."""
        logger.info("Registering plugin: %s", name)
        module = importlib.import_module(name)
        module.register_plugin(self)  # type: ignore

    def register_plugins(self) -> None:
        """Load plugins listed in config variable 'PLUGINS'."""
        registered = set()
        for plugin_fqdn in chain(self.APP_PLUGINS, self.config["PLUGINS"]):
            if plugin_fqdn not in registered:
                self.register_plugin(plugin_fqdn)
                registered.add(plugin_fqdn)


class Application(ServiceManager, PluginManager, ErrorManagerMixin, Flask):
    """Base application class.

    Extend it in your own app.
    """

    default_config = default_config

    def __init__(self, name: Optional[Any] = None, *args: Any, **kwargs: Any) -> None:
        name = name or __name__

        Flask.__init__(self, name, *args, **kwargs)

        ServiceManager.__init__(self)

    def setup(self, config: Optional[type]) -> None:
        self.configure(config)

        # At this point we have loaded all external config files:
        # SQLALCHEMY_DATABASE_URI is definitively fixed, and LOGGING_CONFIG_FILE
        # too.
        self.setup_logging()

        extensions.db.init_app(self)
        self.install_default_handlers()

        with self.app_context():
            self.init_extensions()
            self.register_plugins()
            self.register_commands()

        # At this point all models should have been imported: time to configure
        # mappers, so that a misconfigured mapper fails now rather than on
        # first query.
        sa.orm.configure_mappers()

        signals.components_registered.send(self)

        if not self.testing:
            with self.app_context():
                self.start_services()

    def configure(self, config: Optional[type]) -> None:
        if config:
            self.config.from_object(config)

        # Setup babel config
        languages = self.config["BABEL_ACCEPT_LANGUAGES"]
        languages = tuple(
            lang for lang in languages if lang in labbook.i18n.VALID_LANGUAGES_CODE
        )
        self.config["BABEL_ACCEPT_LANGUAGES"] = languages

        self.config.setdefault("MAIL_DEFAULT_SENDER", self.config["MAIL_SENDER"])

        if not self.debug and not self.testing:
            if self.config["SECRET_KEY"] == "CHANGEME":
                logger.error(
                    "You must change the default secret config ('SECRET_KEY')"
                )
                sys.exit()

    def init_extensions(self) -> None:
        """Initialize flask extensions, helpers and services."""
        extensions.mail.init_app(self)
        extensions.csrf.init_app(self)

        # Babel (for i18n)
        labbook.i18n.babel.init_app(
            self, locale_selector=labbook.i18n.localeselector
        )

        # auth_service installs a `before_request` handler (actually it's
        # flask-login). We want to authenticate user ASAP, so that logs can
        # report which user encountered any error happening later.
        auth_service.init_app(self)
        mail_service.init_app(self)
        comments_service.init_app(self)

    def register_commands(self) -> None:
        from labbook.cli import labbook as labbook_commands

        self.cli.add_command(labbook_commands)


def create_app(
    config: Optional[type] = None, app_class: type = Application, **kw: Any
) -> Application:
    app = app_class(**kw)
    app.setup(config=config)
    return app
