"""
Error taxonomy for the forum services.

Services raise these exceptions and never build HTTP responses
themselves.  Each class carries the HTTP status it maps to and a
default user-facing message; ``main.create_app`` installs a single
handler that renders any ``ForumError`` as ``{"message": ...}``.
"""

from typing import Optional


class ForumError(Exception):
    """Base class for all errors raised by the service layer."""

    status_code: int = 500
    default_message: str = "Internal server error."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ForumError):
    """Missing or malformed input, including oversized answer content."""

    status_code = 400
    default_message = "Invalid request data."


class InvalidIdentifier(ForumError):
    """A path identifier that is not a well-formed integer."""

    status_code = 400
    default_message = "Invalid question ID."


class NotFound(ForumError):
    """The referenced question does not exist."""

    status_code = 404
    default_message = "Question not found."


class StoreError(ForumError):
    """The database failed; the message is generic, the cause is only logged."""

    status_code = 500
    default_message = "Unable to process request."
