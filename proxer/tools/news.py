"""News and notification tools."""

from typing import Optional

from ..core.errors import ProxerError
from ..endpoints import notification
from .common import error_from, get_session, ok


def news(page: Optional[int] = None, limit: Optional[int] = None):
    """Latest Proxer news (page 0 is the newest)."""
    try:
        items = notification.news(get_session(), page, limit)
        results = [
            {**it, "link": notification.news_link(it), "image": notification.news_image_url(it)}
            for it in items
        ]
        return ok(page=page, results=results)
    except ProxerError as e:
        return error_from(e)


def legacy_news(page: int = 1):
    """Front page news feed (old notifications interface)."""
    try:
        return ok(page=page, results=notification.legacy_news(get_session(), page))
    except ProxerError as e:
        return error_from(e)


def notification_count():
    """Unread counters of the logged-in user."""
    try:
        return ok(counts=notification.count(get_session()))
    except ProxerError as e:
        return error_from(e)


def register_tools(mcp):
    mcp.tool()(news)
    mcp.tool()(legacy_news)
    mcp.tool()(notification_count)
