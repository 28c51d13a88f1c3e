"""Decoding of the `{error, code, message, data}` envelope every endpoint returns."""

import json
import logging
from typing import Any, Callable, Optional, Union

from ..models.types import Envelope
from .errors import ApiError, DecodeError, MissingDataError

logger = logging.getLogger(__name__)

SUCCESS = 0
DEFAULT_MESSAGE = "Unknown error"


def _as_int(value: Any, field: str) -> int:
    # floats must be whole; inf and nan are not
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise DecodeError(f"envelope field {field!r} is not an integer: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise DecodeError(f"envelope field {field!r} is not an integer: {value!r}") from e


def parse(raw: Union[bytes, str]) -> Envelope:
    """Parse a response body into an envelope without checking the error code."""
    try:
        env = json.loads(raw)
    except ValueError as e:
        raise DecodeError(f"invalid JSON: {e}") from e
    if not isinstance(env, dict) or "error" not in env:
        raise DecodeError("response is not an API envelope")
    env["error"] = _as_int(env["error"], "error")
    if env.get("code") is not None:
        env["code"] = _as_int(env["code"], "code")
    return env


def check(raw: Union[bytes, str], expected: int = SUCCESS) -> Envelope:
    """Parse and raise ApiError unless `error` equals `expected`."""
    env = parse(raw)
    if env["error"] != expected:
        code = env.get("code")
        if code is None:
            code = env["error"]
        message = env.get("message")
        message = str(message) if message else DEFAULT_MESSAGE
        logger.warning("API error %s: %s", code, message)
        raise ApiError(code, message)
    return env


def unwrap(
    raw: Union[bytes, str],
    normalize: Optional[Callable[[Any], Any]] = None,
    expected: int = SUCCESS,
    data_key: str = "data",
) -> Any:
    """Check the envelope, then return its payload, normalized if asked."""
    env = check(raw, expected)
    data = env.get(data_key)
    if data is None:
        raise MissingDataError(f"success envelope without {data_key!r}")
    if normalize is None:
        return data
    try:
        return normalize(data)
    except (KeyError, TypeError, ValueError, IndexError, OverflowError) as e:
        raise DecodeError(f"unexpected payload shape: {e!r}") from e
