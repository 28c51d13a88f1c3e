"""User endpoints: login/logout and public profile data."""

from typing import Any, Dict, List, Optional

from ..core.http_client import Session
from ..core.normalizers import many, norm_login, norm_ucp_entry, norm_user_info
from ..models.types import Login, UcpEntry, UserInfo
from ._base import call, call_void

CATEGORY = "user"


def login(session: Session, username: str, password: str, secretkey: Optional[str] = None) -> Login:
    """Log in; the service keeps the login in the session cookies. secretkey: 2FA code."""
    return call(
        session, CATEGORY, "login",
        ("username", username), ("password", password), ("secretkey", secretkey),
        normalize=norm_login,
    )


def logout(session: Session) -> None:
    call_void(session, CATEGORY, "logout")


def user_info(session: Session, uid: Optional[int] = None, username: Optional[str] = None) -> UserInfo:
    """Profile of a user by id or name; the logged-in user when both are omitted."""
    return call(session, CATEGORY, "userinfo", ("uid", uid), ("username", username), normalize=norm_user_info)


def top_ten(
    session: Session,
    uid: Optional[int] = None,
    username: Optional[str] = None,
    kat: Optional[str] = None,
    is_h: Optional[bool] = None,
) -> List[Dict[str, Any]]:
    return call(
        session, CATEGORY, "topten",
        ("uid", uid), ("username", username), ("kat", kat), ("isH", is_h),
    )


def list(
    session: Session,
    uid: Optional[int] = None,
    username: Optional[str] = None,
    kat: Optional[str] = None,
    p: Optional[int] = None,
    limit: Optional[int] = None,
    search: Optional[str] = None,
    search_start: Optional[str] = None,
    sort: Optional[str] = None,
    is_h: Optional[bool] = None,
) -> List[UcpEntry]:
    return call(
        session, CATEGORY, "list",
        ("uid", uid), ("username", username), ("kat", kat), ("p", p), ("limit", limit),
        ("search", search), ("search_start", search_start), ("sort", sort), ("isH", is_h),
        normalize=many(norm_ucp_entry),
    )


def comments(
    session: Session,
    uid: Optional[int] = None,
    username: Optional[str] = None,
    kat: Optional[str] = None,
    p: Optional[int] = None,
    limit: Optional[int] = None,
    length: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Comments written by a user; length drops comments shorter than that many characters."""
    return call(
        session, CATEGORY, "comments",
        ("uid", uid), ("username", username), ("kat", kat), ("p", p), ("limit", limit), ("length", length),
    )
