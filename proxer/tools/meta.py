"""Metadata and help tools for proxer-py."""

from ..core.http_client import __VERSION__, BASE_URL, API_VERSION, LEGACY_NEWS_URL, DEFAULT_TIMEOUT
from .common import SCHEMA


def health():
    """Health check endpoint."""
    return {"schemaVersion": SCHEMA, "ok": True, "sources": ["proxer"]}


def about():
    """About information for the service."""
    return {
        "schemaVersion": SCHEMA,
        "name": "proxer-py",
        "version": __VERSION__,
        "unofficial": True,
        "endpoints": {"api": f"{BASE_URL}/{API_VERSION}", "legacyNews": LEGACY_NEWS_URL},
        "limits": {"timeoutSec": DEFAULT_TIMEOUT},
        "notes": [
            "Unofficial client. Proxer asks for as few requests as possible;",
            "set PROXER_MIN_INTERVAL to space requests out.",
        ],
    }


def help_text():
    """Plain text summary of the tools."""
    return (
        "proxer · tools:\n"
        "- news(page, limit): latest news with links.\n"
        "- legacy_news(page): front page news feed.\n"
        "- notification_count(): unread counters (login required).\n"
        "- manga_chapter(id, episode, language): chapter pages.\n"
        "- anime_streams(id, episode, language): episode streams.\n"
        "- entry(id): anime/manga entry.\n"
        "- user_info(uid|username): public profile.\n"
    )


def register_tools(mcp):
    """Register meta/help tools with FastMCP."""
    mcp.tool()(health)
    mcp.tool()(about)
    mcp.tool()(help_text)
