"""Login-related views (login / logout).

Each login attempt increments the `failed_attempt` counter kept in the
session; it is reset when the user logs in.
"""
import logging
from typing import Any, Mapping
from urllib.parse import urljoin, urlparse

from flask import Blueprint, current_app, flash, redirect, render_template, \
    request, session, url_for
from flask_login import login_user, logout_user
from werkzeug.wrappers import Response

from labbook.core.exceptions import ImproperActionError
from labbook.core.models import User
from labbook.core.signals import auth_failed
from labbook.core.util import unwrap
from labbook.i18n import _

__all__ = ("login",)

logger = logging.getLogger(__name__)

login = Blueprint("login", __name__, template_folder="templates")
route = login.route

#: cookie set by pages requiring a login, holds where to go after login
REDIRECT_COOKIE = "redirect"


@route("/login")
def login_form() -> str:
    """Display the login form."""
    return render_template("login/login.html")


def do_login(form: Mapping[str, Any]) -> bool:
    """Check credentials from `form` and log the user in.

    :returns: `True` if the user is now logged in.
    :raise ImproperActionError: if email or password is missing.
    """
    if "email" not in form or "password" not in form:
        raise ImproperActionError(_("A mandatory field is missing!"))

    session["failed_attempt"] = session.get("failed_attempt", 0) + 1

    email = form["email"].strip().lower()
    remember = form.get("rememberme", "off") == "on"
    user = User.get_by_email(email)

    if user is None or not user.is_active or not user.authenticate(form["password"]):
        logger.warning(
            "Failed login attempt for %r from %s", email, request.remote_addr
        )
        auth_failed.send(unwrap(current_app), email=email)
        return False

    login_user(user, remember=remember)
    session.pop("failed_attempt", None)
    return True


@route("/login", methods=["POST"])
def login_post() -> Response:
    try:
        logged_in = do_login(request.form)
    except ImproperActionError as e:
        flash(str(e), "error")
        return redirect(url_for("login.login_form"))

    if not logged_in:
        flash(
            _(
                "Login failed. Either you mistyped your password or your account "
                "isn't activated yet."
            ),
            "error",
        )
        return redirect(url_for("login.login_form"))

    target = request.cookies.get(REDIRECT_COOKIE)
    if not target or not is_safe_url(target):
        target = request.url_root
    return redirect(target)


@route("/logout", methods=["GET", "POST"])
def logout() -> Response:
    logout_user()
    return redirect(url_for("login.login_form"))


# login redirect utilities
#  from http://flask.pocoo.org/snippets/62/
def is_safe_url(target: str) -> bool:
    ref_url = urlparse(request.host_url)
    test_url = urlparse(urljoin(request.url_root, target))
    return test_url.scheme in ("http", "https") and ref_url.netloc == test_url.netloc
