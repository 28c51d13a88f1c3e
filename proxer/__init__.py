"""proxer-py: unofficial client for the Proxer.me API.

Exports the `Proxer` client, the `Session` transport and the exception types.
The FastMCP app factory lives in `proxer.server`.
"""
from .client import Proxer
from .core.errors import ProxerError, ConnectError, TransportError, DecodeError, ApiError, MissingDataError
from .core.http_client import Session, __VERSION__ as __version__

__all__ = [
    "Proxer", "Session",
    "ProxerError", "ConnectError", "TransportError", "DecodeError", "ApiError", "MissingDataError",
]
