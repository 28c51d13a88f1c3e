"""Entry and user lookup tools."""

from typing import Optional

from ..core.errors import ProxerError
from ..endpoints import info, user
from .common import err_payload, error_from, get_session, ok, SOURCE


def entry(id: int):
    """Core data of an anime/manga entry."""
    try:
        return ok(result=info.entry(get_session(), id))
    except ProxerError as e:
        return error_from(e)


def user_info(uid: Optional[int] = None, username: Optional[str] = None):
    """Public profile by user id or username."""
    if uid is None and not username:
        return err_payload(SOURCE, "BAD_REQUEST", "Provide uid or username")
    try:
        return ok(result=user.user_info(get_session(), uid, username))
    except ProxerError as e:
        return error_from(e)


def register_tools(mcp):
    mcp.tool()(entry)
    mcp.tool()(user_info)
