"""Shared plumbing for the MCP tools: the process-wide session and error payloads."""

import functools
from typing import Any, Dict

from ..core.errors import ApiError, ConnectError, DecodeError, MissingDataError, ProxerError, TransportError
from ..core.http_client import Session

SCHEMA = "1.0.0"
SOURCE = "proxer"


@functools.lru_cache(maxsize=None)
def get_session() -> Session:
    """Session built from PROXER_* environment variables on first use."""
    return Session.from_env()


def ok(**fields: Any) -> Dict[str, Any]:
    return {"schemaVersion": SCHEMA, **fields}


def err_payload(source: str, code: str, message: str) -> Dict[str, Any]:
    return {"schemaVersion": SCHEMA, "error": {"code": code, "message": message, "source": source}}


def error_from(e: ProxerError) -> Dict[str, Any]:
    if isinstance(e, ApiError):
        return err_payload(SOURCE, f"API_{e.code}", e.message)
    if isinstance(e, TransportError):
        code = f"UPSTREAM_{e.status_code}" if e.status_code else "TRANSPORT"
        return err_payload(SOURCE, code, str(e))
    if isinstance(e, MissingDataError):
        return err_payload(SOURCE, "NO_DATA", str(e))
    if isinstance(e, DecodeError):
        return err_payload(SOURCE, "BAD_RESPONSE", str(e))
    if isinstance(e, ConnectError):
        return err_payload(SOURCE, "CONFIG", str(e))
    return err_payload(SOURCE, "UNEXPECTED", str(e))
