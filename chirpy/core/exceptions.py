"""
Application-level exceptions.

Domain errors carry the HTTP status and client-facing message they are
reported with, so the API layer renders them without re-deciding.
"""

from __future__ import annotations


class ChirpyError(Exception):
    """Base class for Chirpy errors."""


class ConfigError(ChirpyError):
    """Invalid or unusable configuration."""


class ChirpValidationError(ChirpyError):
    """A chirp was rejected; reported to the client as {"error": message}."""

    status_code: int = 400
    message: str = "Invalid chirp"

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class MalformedChirpError(ChirpValidationError):
    """Request body could not be decoded into {"body": <string>}.

    Reported as a server error, as the original Chirpy server does.
    """

    status_code = 500
    message = "Something went wrong"


class ChirpTooLongError(ChirpValidationError):
    """Chirp body exceeds the maximum length."""

    status_code = 400
    message = "Chirp is too long"
