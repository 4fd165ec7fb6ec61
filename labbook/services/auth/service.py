""""""
import logging
import typing
from typing import Optional

from labbook.core.extensions import db, login_manager
from labbook.core.models import User
from labbook.i18n import _l
from labbook.services.base import Service

from .views import login as login_views

if typing.TYPE_CHECKING:
    from labbook.app import Application

__all__ = ["AuthService"]

logger = logging.getLogger(__name__)


class AuthService(Service):
    name = "auth"

    def init_app(self, app: "Application") -> None:
        login_manager.init_app(app)
        login_manager.login_view = "login.login_form"
        login_manager.login_message = _l("Please log in to access this page.")
        login_manager.user_loader(self.load_user)

        Service.init_app(self, app)
        app.register_blueprint(login_views)

    @staticmethod
    def load_user(user_id: str) -> Optional[User]:
        try:
            user = db.session.get(User, int(user_id))
        except ValueError:
            logger.warning("Invalid user id in session: %r", user_id)
            return None

        if user is None or not user.is_active:
            return None
        return user
