"""Messenger endpoints. Everything here needs a logged-in user."""

from typing import Any, Dict, List, Optional, Sequence

from ..core.http_client import Session
from ..core.normalizers import many, norm_conference, norm_message
from ..models.types import Conference, Message
from ._base import call, call_void

CATEGORY = "messenger"


def constants(session: Session) -> Dict[str, Any]:
    """Server-side limits: text length, conferences and messages per page, topic length."""
    return call(session, CATEGORY, "constants")


def conferences(session: Session, type: Optional[str] = None, p: Optional[int] = None) -> List[Conference]:
    """type: default, favour, block, group or personal."""
    return call(session, CATEGORY, "conferences", ("type", type), ("p", p), normalize=many(norm_conference))


def conference_info(session: Session, conference_id: int, p: Optional[int] = None) -> Dict[str, Any]:
    return call(session, CATEGORY, "conferenceinfo", ("conference_id", conference_id), ("p", p))


def user_info(session: Session, conference_id: Optional[int] = None) -> Dict[str, Any]:
    return call(session, CATEGORY, "userinfo", ("conference_id", conference_id))


def messages(
    session: Session,
    conference_id: Optional[int] = None,
    message_id: Optional[int] = None,
    mark_read: Optional[bool] = None,
) -> List[Message]:
    """
    Messages of one conference, or of all conferences when conference_id is 0.
    message_id: load the messages before this one. mark_read: mark the conference as read.
    """
    return call(
        session, CATEGORY, "messages",
        ("conference_id", conference_id), ("message_id", message_id), ("read", mark_read),
        normalize=many(norm_message),
    )


def new_conference(session: Session, username: str, text: str) -> int:
    """Start (or reuse) a private conference; returns its id."""
    return call(session, CATEGORY, "newconference", ("username", username), ("text", text), normalize=int)


def new_group_conference(
    session: Session,
    users: Sequence[str],
    topic: str,
    text: Optional[str] = None,
) -> int:
    return call(
        session, CATEGORY, "newconferencegroup",
        ("users[]", list(users)), ("topic", topic), ("text", text),
        normalize=int,
    )


def report(session: Session, conference_id: int, text: str) -> None:
    call_void(session, CATEGORY, "report", ("conference_id", conference_id), ("text", text))


def set_message(session: Session, conference_id: int, text: str) -> None:
    call_void(session, CATEGORY, "setmessage", ("conference_id", conference_id), ("text", text))


def set_read(session: Session, conference_id: int) -> None:
    call_void(session, CATEGORY, "setread", ("conference_id", conference_id))


def set_unread(session: Session, conference_id: int) -> None:
    call_void(session, CATEGORY, "setunread", ("conference_id", conference_id))


def set_block(session: Session, conference_id: int) -> None:
    call_void(session, CATEGORY, "setblock", ("conference_id", conference_id))


def set_unblock(session: Session, conference_id: int) -> None:
    call_void(session, CATEGORY, "setunblock", ("conference_id", conference_id))


def set_favour(session: Session, conference_id: int) -> None:
    call_void(session, CATEGORY, "setfavour", ("conference_id", conference_id))


def set_unfavour(session: Session, conference_id: int) -> None:
    call_void(session, CATEGORY, "setunfavour", ("conference_id", conference_id))
