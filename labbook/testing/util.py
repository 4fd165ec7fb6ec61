"""Elements to build test cases for an :class:`labbook.app.Application`"""
from typing import ContextManager, List

from flask.testing import FlaskClient
from flask_login import login_user, logout_user

from labbook.app import Application
from labbook.core.models import User
from labbook.services import get_service

__all__ = (
    "stop_all_services",
    "ensure_services_started",
    "client_login",
    "login",
)


def client_login(client: FlaskClient, user: User) -> ContextManager:
    """Log `user` in through the login form; log out on exit when used as a
    context manager."""
    data = {"email": user.email, "password": user._password}
    response = client.post("/login", data=data)
    assert response.status_code == 302

    class LoginContext:
        def __enter__(self):
            return None

        def __exit__(self, type, value, traceback):
            response = client.post("/logout")
            assert response.status_code == 302

    return LoginContext()


def login(user: User, remember: bool = False, force: bool = False) -> ContextManager:
    """Perform user login for `user`, so that code needing a logged-in user can
    work.

    This method can also be used as a context manager, so that logout is
    performed automatically::

        with login(user):
            assert ...
    """
    success = login_user(user, remember=remember, force=force)
    if not success:
        raise ValueError("User is not active, cannot login; or use force=True")

    class LoginContext:
        def __enter__(self):
            return None

        def __exit__(self, type, value, traceback):
            logout_user()

    return LoginContext()


def ensure_services_started(services: List[str]) -> None:
    for service_name in services:
        service = get_service(service_name)
        if not service.running:
            service.start()


def stop_all_services(app: Application) -> None:
    for service in app.services.values():
        if service.running:
            service.stop()
