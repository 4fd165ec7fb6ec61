"""Exceptions raised by labbook components.

:class:`ImproperActionError` messages are meant for end users and are shown
verbatim. :class:`IllegalActionError` and :class:`StorageError` carry details
for the logs only: users get a generic message.
"""
from typing import Optional


class LabbookError(Exception):
    """Base class for all labbook errors."""

    #: HTTP status code used when the error reaches a view
    status_code = 500


class ImproperActionError(LabbookError):
    """The user did something wrong, and should be told so."""

    status_code = 400


class ValidationError(ImproperActionError):
    """Input failed validation."""


class InputTooShort(ValidationError):
    def __init__(self, message: str, minimum: int) -> None:
        super().__init__(message)
        self.minimum = minimum


class IllegalActionError(LabbookError):
    """The user tried something they are not allowed to do."""

    status_code = 403


class StorageError(LabbookError):
    """A persistence statement failed to execute."""

    def __init__(
        self,
        message: str = "Error while executing SQL query.",
        statement: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.statement = statement
