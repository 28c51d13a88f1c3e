"""Anime endpoints: stream listings and hoster links."""

from typing import List

from ..core.http_client import Session
from ..core.normalizers import as_text, many, norm_stream
from ..models.types import Stream
from ._base import call

CATEGORY = "anime"


def streams(session: Session, id: int, episode: int, language: str) -> List[Stream]:
    """Streams of one episode. language: gersub, gerdub, engsub or engdub."""
    return call(
        session, CATEGORY, "streams",
        ("id", id), ("episode", episode), ("language", language),
        normalize=many(norm_stream),
    )


def proxer_streams(session: Session, id: int, episode: int, language: str) -> List[Stream]:
    """Like `streams`, restricted to streams hosted by Proxer itself."""
    return call(
        session, CATEGORY, "proxerstreams",
        ("id", id), ("episode", episode), ("language", language),
        normalize=many(norm_stream),
    )


def link(session: Session, id: int) -> str:
    """Embeddable hoster link of a stream id."""
    return call(session, CATEGORY, "link", ("id", id), normalize=as_text)
