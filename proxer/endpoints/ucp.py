"""User control panel endpoints for the logged-in user."""

from typing import Any, Dict, List, Optional

from ..core.http_client import Session
from ..core.normalizers import many, norm_ucp_entry
from ..models.types import UcpEntry
from ._base import call, call_void

CATEGORY = "ucp"


def list(
    session: Session,
    kat: Optional[str] = None,
    p: Optional[int] = None,
    limit: Optional[int] = None,
    search: Optional[str] = None,
    search_start: Optional[str] = None,
    sort: Optional[str] = None,
) -> List[UcpEntry]:
    """
    Anime or manga list of the logged-in user.
    kat: anime (default) or manga. sort: nameASC, nameDESC, stateNameASC, ...
    """
    return call(
        session, CATEGORY, "list",
        ("kat", kat), ("p", p), ("limit", limit),
        ("search", search), ("search_start", search_start), ("sort", sort),
        normalize=many(norm_ucp_entry),
    )


def list_sum(session: Session, kat: Optional[str] = None) -> int:
    """Total episodes (anime) or chapters (manga) consumed."""
    return call(session, CATEGORY, "listsum", ("kat", kat), normalize=int)


def top_ten(session: Session) -> List[Dict[str, Any]]:
    return call(session, CATEGORY, "topten")


def history(session: Session, p: Optional[int] = None, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    return call(session, CATEGORY, "history", ("p", p), ("limit", limit))


def votes(session: Session) -> List[Dict[str, Any]]:
    return call(session, CATEGORY, "votes")


def reminder(
    session: Session,
    kat: Optional[str] = None,
    p: Optional[int] = None,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    return call(session, CATEGORY, "reminder", ("kat", kat), ("p", p), ("limit", limit))


def delete_reminder(session: Session, id: int) -> None:
    call_void(session, CATEGORY, "deletereminder", ("id", id))


def delete_favorite(session: Session, id: int) -> None:
    call_void(session, CATEGORY, "deletefavorite", ("id", id))


def delete_vote(session: Session, id: int) -> None:
    call_void(session, CATEGORY, "deletevote", ("id", id))


def set_comment_state(session: Session, id: int, value: int) -> None:
    """value: 0 watched, 1 watching, 2 will watch, 3 cancelled."""
    call_void(session, CATEGORY, "setcommentstate", ("id", id), ("value", value))


def set_reminder(session: Session, id: int, episode: int, language: str, kat: str) -> None:
    call_void(
        session, CATEGORY, "setreminder",
        ("id", id), ("episode", episode), ("language", language), ("kat", kat),
    )
