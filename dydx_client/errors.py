"""Exceptions raised by the dYdX client."""
from __future__ import annotations

from typing import Any


class DydxError(Exception):
    """Base class for errors raised by this package."""


class DydxApiError(DydxError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status: int, body: Any, method: str = "", url: str = "") -> None:
        self.status = status
        self.body = body
        self.method = method
        self.url = url
        super().__init__(f"DydxApiError(status={status}, body={body!r})")


class SigningError(DydxError):
    """Raised when an onboarding action cannot be signed."""
