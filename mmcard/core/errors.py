"""Error taxonomy shared by services and routers."""
from __future__ import annotations


class CardError(Exception):
    """Base exception for the card service; carries the HTTP status to use."""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InputError(CardError):
    """Raised when a request parameter is missing or malformed."""

    status_code = 400
    default_message = "Invalid request"


class NotFoundError(CardError):
    """Raised when no profile matches the requested slug."""

    status_code = 404
    default_message = "Card not found"


class EncodingError(CardError):
    """Raised when the QR payload is empty or exceeds QR capacity."""

    status_code = 500
    default_message = "QR generation failed"
