"""Logging setup and error handling for the application class."""
import logging
import logging.config
from functools import partial
from pathlib import Path

import yaml
from flask import Flask, jsonify
from flask_login import current_user
from werkzeug.exceptions import HTTPException

from labbook.core.exceptions import IllegalActionError, ImproperActionError, \
    LabbookError
from labbook.core.extensions import db
from labbook.i18n import _

logger = logging.getLogger(__name__)

DEFAULT_LOGGING_FILE = Path(__file__).parent.parent / "core" / "default_logging.yml"


class ErrorManagerMixin(Flask):
    def setup_logging(self) -> None:
        # Force flask to create application logger before logging
        # configuration; else, flask will overwrite our settings
        self.logger  # noqa

        logging_file = self.config.get("LOGGING_CONFIG_FILE")
        if logging_file:
            logging_file = (Path(self.instance_path) / logging_file).resolve()
        else:
            logging_file = DEFAULT_LOGGING_FILE

        if logging_file.suffix == ".ini":
            # old standard 'ini' file config
            logging.config.fileConfig(str(logging_file), disable_existing_loggers=False)
        elif logging_file.suffix in (".yml", ".yaml"):
            # yaml config file
            with logging_file.open() as fd:
                logging_cfg = yaml.safe_load(fd)
            logging_cfg.setdefault("version", 1)
            logging_cfg.setdefault("disable_existing_loggers", False)
            logging.config.dictConfig(logging_cfg)

        log_level = self.config.get("LOG_LEVEL")
        if log_level:
            self.logger.setLevel(log_level)
            logging.getLogger("labbook").setLevel(log_level)

    def handle_user_exception(self, e):
        # Inconditionally forget all DB changes, and ensure clean session
        # during exception handling.
        session = db.session()
        if session.is_active:
            session.rollback()

        return Flask.handle_user_exception(self, e)

    def install_default_handlers(self) -> None:
        for http_error_code in (400, 403, 404, 405, 500):
            self.install_default_handler(http_error_code)
        self.register_error_handler(LabbookError, self.handle_labbook_error)

    def install_default_handler(self, http_error_code: int) -> None:
        """Install a default error handler for `http_error_code`."""
        logger.debug(
            "Set Default HTTP error handler for status code %d", http_error_code
        )
        handler = partial(self.handle_http_error, http_error_code)
        self.errorhandler(http_error_code)(handler)

    def handle_http_error(self, code: int, error: Exception):
        """Render HTTP errors as JSON: `{"res": false, "msg": ...}`."""
        # 5xx code: error on server side
        if (code // 100) == 5:
            db.session.rollback()

        if isinstance(error, HTTPException):
            msg = error.description
        else:
            msg = _("An error occurred!")
        return jsonify(res=False, msg=msg), code

    def handle_labbook_error(self, error: LabbookError):
        """Map labbook exceptions to responses.

        Improper actions are shown to the user verbatim. Details of illegal
        actions and storage errors go to the logs only.
        """
        user_id = getattr(current_user, "id", None)
        if isinstance(error, ImproperActionError):
            msg = str(error)
        elif isinstance(error, IllegalActionError):
            logger.warning("Illegal action by user %s: %s", user_id, error)
            msg = _("This section is out of your reach!")
        else:
            logger.error("Error for user %s", user_id, exc_info=error)
            msg = _("An error occurred!")
        return jsonify(res=False, msg=msg), error.status_code
