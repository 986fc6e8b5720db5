"""
Client error taxonomy

Every failure the core can report to the user is one of these.
None of them is retried.
"""
from typing import Iterable, Optional


class InventoryClientError(Exception):
    """Base class for errors surfaced to the user"""


class TransportError(InventoryClientError):
    """The request never reached the server (connection refused, timeout...)"""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)


class ServerError(InventoryClientError):
    """The server answered with a non-2xx status or an unreadable body"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class ValidationError(InventoryClientError):
    """Client-side form validation failed; nothing was sent"""

    def __init__(self, message: str, missing_fields: Iterable[str] = ()):
        self.missing_fields = list(missing_fields)
        super().__init__(message)
