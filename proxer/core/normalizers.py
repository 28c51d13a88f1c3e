"""Conversion of raw Proxer payloads into records.

The service sends most numbers as strings and uses "0"/"1" for booleans,
so every numeric field goes through `_int` and every flag through `as_bool`.
Missing required keys raise KeyError, which the envelope codec reports as a
decode failure.
"""

from typing import Any, Dict, List, Optional

from ..models.types import (
    News, NewsNotification, NotificationCount, Page, Chapter, Stream, Entry,
    EntryName, UserInfo, Login, Conference, Message, Header, UcpEntry,
)


def _int(v: Any) -> int:
    if isinstance(v, float) and not v.is_integer():
        raise ValueError(f"not a whole number: {v!r}")
    return int(v)


def _opt_int(v: Any) -> Optional[int]:
    if v is None or v == "":
        return None
    return _int(v)


def as_text(v: Any) -> str:
    if not isinstance(v, str):
        raise TypeError(f"expected a string, got {type(v).__name__}")
    return v


def as_bool(v: Any) -> bool:
    if isinstance(v, str):
        return v.strip().lower() in ("1", "true")
    return bool(v)


def as_words(v: Any) -> List[str]:
    if not v:
        return []
    if isinstance(v, str):
        return v.split()
    return [str(x) for x in v]


def norm_news(m: Dict[str, Any]) -> News:
    return {
        "nid": _int(m["nid"]),
        "time": _int(m["time"]),
        "mid": _int(m.get("mid") or m.get("thread") or 0),
        "description": m.get("description") or "",
        "image_id": str(m.get("image_id") or ""),
        "image_style": m.get("image_style") or "",
        "subject": m.get("subject") or "",
        "hits": _int(m.get("hits") or 0),
        "thread": _int(m.get("thread") or m.get("mid") or 0),
        "uid": _int(m.get("uid") or 0),
        "uname": m.get("uname") or "",
        "posts": _int(m.get("posts") or 0),
        "catid": _int(m.get("catid") or 0),
        "catname": m.get("catname") or "",
    }


def norm_news_notification(m: Dict[str, Any]) -> NewsNotification:
    n = norm_news(m)
    n.pop("mid")
    return n


def norm_count(raw: Any) -> NotificationCount:
    """Counts arrive as "e,a,b,c,d,f" or a list; a leading error slot is dropped."""
    values = raw.split(",") if isinstance(raw, str) else list(raw)
    nums = [_int(v) for v in values]
    if len(nums) == 6:
        nums = nums[1:]
    if len(nums) != 5:
        raise ValueError(f"expected 5 notification counts, got {len(nums)}")
    return {
        "private_messages_legacy": nums[0],
        "private_messages": nums[1],
        "friend_requests": nums[2],
        "news": nums[3],
        "notifications": nums[4],
    }


def norm_page(p: Any) -> Page:
    if isinstance(p, dict):
        name, height, width = p["name"], p["height"], p["width"]
    else:
        name, height, width = p
    return {"name": str(name), "height": _int(height), "width": _int(width)}


def norm_chapter(m: Dict[str, Any]) -> Chapter:
    return {
        "cid": _int(m["cid"]),
        "eid": _int(m["eid"]),
        "title": m.get("title") or "",
        "uploader": _int(m.get("uploader") or 0),
        "username": m.get("username") or "",
        "timestamp": _int(m.get("timestamp") or 0),
        "tid": _opt_int(m.get("tid")),
        "tname": m.get("tname"),
        "server": _int(m.get("server") or 0),
        "pages": [norm_page(p) for p in (m.get("pages") or [])],
    }


def norm_stream(m: Dict[str, Any]) -> Stream:
    return {
        "id": _int(m["id"]),
        "type": m.get("type") or "",
        "name": m.get("name") or "",
        "img": m.get("img") or "",
        "uploader": _int(m.get("uploader") or 0),
        "username": m.get("username") or "",
        "timestamp": _int(m.get("timestamp") or 0),
        "tid": _opt_int(m.get("tid")),
        "tname": m.get("tname"),
    }


def norm_entry(m: Dict[str, Any]) -> Entry:
    return {
        "id": _int(m["id"]),
        "name": m["name"],
        "genre": as_words(m.get("genre")),
        "fsk": as_words(m.get("fsk")),
        "description": m.get("description") or "",
        "medium": m.get("medium") or "",
        "count": _int(m.get("count") or 0),
        "state": _int(m.get("state") or 0),
        "rate_sum": _int(m.get("rate_sum") or 0),
        "rate_count": _int(m.get("rate_count") or 0),
        "clicks": _int(m.get("clicks") or 0),
        "kat": m.get("kat") or "",
        "license": _int(m.get("license") or 0),
    }


def norm_entry_name(m: Dict[str, Any]) -> EntryName:
    return {"id": _int(m["id"]), "eid": _int(m["eid"]), "type": m.get("type") or "", "name": m["name"]}


def norm_user_info(m: Dict[str, Any]) -> UserInfo:
    return {
        "uid": _int(m["uid"]),
        "username": m["username"],
        "avatar": m.get("avatar") or "",
        "status": m.get("status") or "",
        "status_time": _int(m.get("status_time") or 0),
        "points_uploads": _int(m.get("points_uploads") or 0),
        "points_anime": _int(m.get("points_anime") or 0),
        "points_manga": _int(m.get("points_manga") or 0),
        "points_info": _int(m.get("points_info") or 0),
        "points_forum": _int(m.get("points_forum") or 0),
        "points_misc": _int(m.get("points_misc") or 0),
    }


def norm_login(m: Dict[str, Any]) -> Login:
    return {"uid": _int(m["uid"]), "avatar": m.get("avatar") or "", "token": m["token"]}


def norm_conference(m: Dict[str, Any]) -> Conference:
    return {
        "id": _int(m["id"]),
        "topic": m.get("topic") or "",
        "topic_custom": m.get("topic_custom") or "",
        "count": _int(m.get("count") or 0),
        "group": as_bool(m.get("group")),
        "image": m.get("image") or "",
        "read": as_bool(m.get("read")),
        "timestamp_end": _int(m.get("timestamp_end") or 0),
        "read_mid": _int(m.get("read_mid") or 0),
    }


def norm_message(m: Dict[str, Any]) -> Message:
    return {
        "message_id": _int(m["message_id"]),
        "conference_id": _int(m["conference_id"]),
        "user_id": _int(m.get("user_id") or 0),
        "username": m.get("username") or "",
        "message": m.get("message") or "",
        "action": m.get("action") or "",
        "timestamp": _int(m.get("timestamp") or 0),
        "device": m.get("device") or "",
    }


def norm_header(m: Dict[str, Any]) -> Header:
    return {"id": _int(m["id"]), "img": m["img"], "path": m.get("path") or ""}


def norm_ucp_entry(m: Dict[str, Any]) -> UcpEntry:
    return {
        "id": _int(m["id"]),
        "name": m["name"],
        "count": _int(m.get("count") or 0),
        "medium": m.get("medium") or "",
        "estate": _int(m.get("estate") or 0),
        "cid": _int(m.get("cid") or 0),
        "comment": m.get("comment") or "",
        "state": _int(m.get("state") or 0),
        "episode": _int(m.get("episode") or 0),
        "rating": _int(m.get("rating") or 0),
        "timestamp": _int(m.get("timestamp") or 0),
    }


def many(norm):
    """Lift a single-record normalizer to a list payload."""
    def _many(items: List[Dict[str, Any]]) -> list:
        return [norm(x) for x in items]
    return _many
