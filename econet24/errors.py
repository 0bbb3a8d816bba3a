"""
Exception hierarchy for the econet24 client.

Every exception carries the name of the operation that failed so a caller
can tell a login failure apart from a later command failure::

    Econet24Error
    ├── AuthError
    └── RequestError
        ├── TransportError
        ├── StatusError
        └── DecodeError
"""


class Econet24Error(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation


class AuthError(Econet24Error):
    """
    Login handshake failed.

    Covers an unreachable service, a landing page without the anti-forgery
    token and rejected credentials alike.
    """

    def __init__(self, message: str) -> None:
        super().__init__("login", message)


class RequestError(Econet24Error):
    """A command against an authenticated session failed."""


class TransportError(RequestError):
    """The request never produced an HTTP response."""


class StatusError(RequestError):
    """The service answered with a non-200 status."""

    def __init__(self, operation: str, status_code: int) -> None:
        super().__init__(operation, f"bad status code: {status_code}")
        self.status_code = status_code


class DecodeError(RequestError):
    """The response body does not have the expected JSON shape."""
