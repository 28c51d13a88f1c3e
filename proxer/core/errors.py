"""Exception types raised by the proxer client."""

from typing import Optional


class ProxerError(Exception):
    """Base exception for every failure surfaced by the client."""


class ConnectError(ProxerError):
    """The session could not be set up (TLS context, CA bundle)."""


class TransportError(ProxerError):
    """A request did not complete: connection, timeout, TLS or HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ProxerError):
    """The response body is not JSON or does not have the expected shape."""


class ApiError(ProxerError):
    """The service answered with a non-success error code."""

    def __init__(self, code: int, message: str):
        super().__init__(f"[{code}] {message}")
        self.code = code
        self.message = message


class MissingDataError(ProxerError):
    """Success code without a payload."""
