"""Entry information endpoints.

Most of these return nested structures the service documents only loosely,
so only `entry` and `names` are normalized into records; the others hand
back the decoded JSON payload as-is.
"""

from typing import Any, Dict, List, Optional

from ..core.http_client import Session
from ..core.normalizers import as_bool, as_words, many, norm_entry, norm_entry_name
from ..models.types import Entry, EntryName
from ._base import call, call_void

CATEGORY = "info"


def full_entry(session: Session, id: int) -> Dict[str, Any]:
    """Entry with names, languages, seasons, groups, publishers and tags in one call."""
    return call(session, CATEGORY, "fullentry", ("id", id))


def entry(session: Session, id: int) -> Entry:
    return call(session, CATEGORY, "entry", ("id", id), normalize=norm_entry)


def names(session: Session, id: int) -> List[EntryName]:
    return call(session, CATEGORY, "names", ("id", id), normalize=many(norm_entry_name))


def gate(session: Session, id: int) -> bool:
    """Whether the entry is behind the age gate."""
    return call(session, CATEGORY, "gate", ("id", id), normalize=as_bool)


def languages(session: Session, id: int) -> List[str]:
    return call(session, CATEGORY, "lang", ("id", id), normalize=as_words)


def seasons(session: Session, id: int) -> List[Dict[str, Any]]:
    return call(session, CATEGORY, "season", ("id", id))


def groups(session: Session, id: int) -> List[Dict[str, Any]]:
    """Translator groups attached to the entry."""
    return call(session, CATEGORY, "groups", ("id", id))


def publishers(session: Session, id: int) -> List[Dict[str, Any]]:
    return call(session, CATEGORY, "publisher", ("id", id))


def list_info(session: Session, id: int, p: Optional[int] = None, limit: Optional[int] = None) -> Dict[str, Any]:
    """Episode/chapter listing with available languages."""
    return call(session, CATEGORY, "listinfo", ("id", id), ("p", p), ("limit", limit))


def comments(
    session: Session,
    id: int,
    p: Optional[int] = None,
    limit: Optional[int] = None,
    sort: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """sort: "rating" for most helpful first, newest first otherwise."""
    return call(session, CATEGORY, "comments", ("id", id), ("p", p), ("limit", limit), ("sort", sort))


def relations(session: Session, id: int, is_h: Optional[bool] = None) -> List[Dict[str, Any]]:
    return call(session, CATEGORY, "relations", ("id", id), ("isH", is_h))


def entry_tags(session: Session, id: int) -> List[Dict[str, Any]]:
    return call(session, CATEGORY, "entrytags", ("id", id))


def set_user_info(session: Session, id: int, type: str) -> None:
    """Put the entry on the logged-in user's list. type: note, favor or finish."""
    call_void(session, CATEGORY, "setuserinfo", ("id", id), ("type", type))
