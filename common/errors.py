"""
Error types raised by the client layer.

    - `RequestError`: the backend answered with a non-2xx status. Carries the
        status code, reason phrase, raw body and the best-effort message.
        401/403 are not a separate class; check `is_authorization_error`.
    - `ValidationError`: a form value was rejected before any request was
        sent (empty comment, short password, ...).

Transport failures (DNS, refused connection, timeout) are not wrapped: they
surface as the `requests.RequestException` raised by `requests`.
"""

from __future__ import annotations
from typing import Optional


class RequestError(Exception):
    """Raised when the API responds with a status outside 2xx."""

    def __init__(self, status: int, status_text: str = "", body: str = "", message: Optional[str] = None):
        self.status = status
        self.status_text = status_text or ""
        self.body = body or ""
        self.message = message or f"API Error: {status} {self.status_text}".strip()
        super().__init__(self.message)

    @property
    def is_authorization_error(self) -> bool:
        return self.status in (401, 403)

    def __repr__(self) -> str:
        return f"RequestError(status={self.status!r}, message={self.message!r})"


class ValidationError(ValueError):
    """Raised for invalid form input before any network call."""
