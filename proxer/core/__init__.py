"""Core functionality for proxer-py."""

from .errors import ProxerError, ConnectError, TransportError, DecodeError, ApiError, MissingDataError
from .http_client import Session, api_url, BASE_URL, API_VERSION, DEFAULT_TIMEOUT
from .envelope import parse, check, unwrap, SUCCESS, DEFAULT_MESSAGE
from .params import build_body

__all__ = [
    "ProxerError", "ConnectError", "TransportError", "DecodeError", "ApiError", "MissingDataError",
    "Session", "api_url", "BASE_URL", "API_VERSION", "DEFAULT_TIMEOUT",
    "parse", "check", "unwrap", "SUCCESS", "DEFAULT_MESSAGE",
    "build_body",
]
