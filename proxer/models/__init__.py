"""Models and type definitions for proxer-py."""

from .types import (
    Envelope, News, NewsNotification, NotificationCount, Page, Chapter, Stream,
    Entry, EntryName, UserInfo, Login, Conference, Message, Header, UcpEntry,
)

__all__ = [
    "Envelope", "News", "NewsNotification", "NotificationCount", "Page", "Chapter",
    "Stream", "Entry", "EntryName", "UserInfo", "Login", "Conference", "Message",
    "Header", "UcpEntry",
]
