"""List endpoints: entry search, entry listings and tags."""

from typing import Any, Dict, List, Optional, Sequence

from ..core.http_client import Session
from ._base import call

CATEGORY = "list"


def entry_search(
    session: Session,
    name: Optional[str] = None,
    language: Optional[str] = None,
    type: Optional[str] = None,
    genre: Optional[Sequence[str]] = None,
    nogenre: Optional[Sequence[str]] = None,
    fsk: Optional[Sequence[str]] = None,
    sort: Optional[str] = None,
    length: Optional[int] = None,
    length_limit: Optional[str] = None,
    tags: Optional[Sequence[int]] = None,
    notags: Optional[Sequence[int]] = None,
    tagratefilter: Optional[str] = None,
    tagspoilerfilter: Optional[str] = None,
    p: Optional[int] = None,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Extended entry search.
    length_limit: "up" or "down", relative to `length` episodes/chapters.
    Sequences are sent space separated.
    """
    return call(
        session, CATEGORY, "entrysearch",
        ("name", name), ("language", language), ("type", type),
        ("genre", genre), ("nogenre", nogenre), ("fsk", fsk), ("sort", sort),
        ("length", length), ("length-limit", length_limit),
        ("tags", tags), ("notags", notags),
        ("tagratefilter", tagratefilter), ("tagspoilerfilter", tagspoilerfilter),
        ("p", p), ("limit", limit),
    )


def entry_list(
    session: Session,
    kat: Optional[str] = None,
    medium: Optional[str] = None,
    is_h: Optional[bool] = None,
    start: Optional[str] = None,
    p: Optional[int] = None,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Alphabetical listing. kat: anime or manga. start: leading letters of the name."""
    return call(
        session, CATEGORY, "entrylist",
        ("kat", kat), ("medium", medium), ("isH", is_h), ("start", start), ("p", p), ("limit", limit),
    )


def tag_ids(session: Session, search: str) -> Dict[str, Any]:
    """Resolve tag names (space separated, "-" prefix to exclude) to tag ids."""
    return call(session, CATEGORY, "tagids", ("search", search))


def tags(
    session: Session,
    search: Optional[str] = None,
    type: Optional[str] = None,
    sort: Optional[str] = None,
    sort_type: Optional[str] = None,
    subtype: Optional[str] = None,
) -> List[Dict[str, Any]]:
    return call(
        session, CATEGORY, "tags",
        ("search", search), ("type", type), ("sort", sort), ("sort_type", sort_type), ("subtype", subtype),
    )
