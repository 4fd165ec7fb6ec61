"""Outgoing email."""
from .service import MailService

__all__ = ["MailService"]
