"""Modules that provide services.

They are implemented as Flask extensions (see:
https://flask.palletsprojects.com/en/latest/extensiondev/ )
"""
from flask import current_app

# This one must be imported first
from .base import Service, ServiceState

# Don't remove (used to force import order)
assert Service, ServiceState

from .auth import AuthService
from .comments import CommentsService
from .mail import MailService

auth_service = AuthService()
comments_service = CommentsService()
mail_service = MailService()


def get_service(service: str) -> Service:
    return current_app.services[service]
