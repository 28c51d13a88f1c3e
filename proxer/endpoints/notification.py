"""Notification endpoints: the red counters, news and notification cleanup."""

from typing import List, Optional

from ..core.envelope import unwrap
from ..core.http_client import Session, LEGACY_NEWS_URL
from ..core.normalizers import many, norm_count, norm_news, norm_news_notification
from ..models.types import News, NewsNotification, NotificationCount
from ._base import call, call_void

CATEGORY = "notifications"
LEGACY_SUCCESS = 0
NEWS_IMAGE_URL = "https://cdn.proxer.me/news/{nid}_{image_id}.png"
NEWS_THUMB_URL = "https://cdn.proxer.me/news/th/{nid}_{image_id}.png"
NEWS_LINK_URL = "https://proxer.me/forum/{catid}/{thread}"


def count(session: Session) -> NotificationCount:
    """Unread counts per notification category."""
    return call(session, CATEGORY, "count", normalize=norm_count)


def news(session: Session, p: Optional[int] = None, limit: Optional[int] = None) -> List[News]:
    """
    Latest news, newest first.
    p: page, starting at 0 (default first page). limit: news per page (service default 15).
    """
    return call(session, CATEGORY, "news", ("p", p), ("limit", limit), normalize=many(norm_news))


def delete(session: Session, nid: Optional[int] = None) -> None:
    """Delete one notification; without `nid` (or 0) every read notification is removed."""
    call_void(session, CATEGORY, "delete", ("nid", nid))


def legacy_news(session: Session, page: int = 1) -> List[NewsNotification]:
    """Front page news feed served by the pre-v1 notifications page."""
    r = session.get(LEGACY_NEWS_URL, params={"format": "json", "s": "news", "p": page})
    return unwrap(r.content, many(norm_news_notification), LEGACY_SUCCESS, data_key="notifications")


def news_image_url(item: NewsNotification, thumbnail: bool = False) -> str:
    tpl = NEWS_THUMB_URL if thumbnail else NEWS_IMAGE_URL
    return tpl.format(nid=item["nid"], image_id=item["image_id"])


def news_link(item: NewsNotification) -> str:
    return NEWS_LINK_URL.format(catid=item["catid"], thread=item["thread"])
