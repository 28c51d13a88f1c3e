"""Manga chapter and anime stream tools."""

from typing import Optional

from ..core.errors import ProxerError
from ..endpoints import anime, manga
from .common import error_from, get_session, ok


def manga_chapter(id: int, episode: int, language: Optional[str] = None):
    """Chapter of a manga entry with direct page URLs. language: 'de' or 'en'."""
    try:
        chapters = manga.chapter(get_session(), id, episode, language)
        results = [{**ch, "page_urls": [manga.page_url(ch, p) for p in ch["pages"]]} for ch in chapters]
        return ok(id=id, episode=episode, results=results)
    except ProxerError as e:
        return error_from(e)


def anime_streams(id: int, episode: int, language: str = "engsub"):
    """Streams of an anime episode. language: gersub, gerdub, engsub, engdub."""
    try:
        return ok(id=id, episode=episode, results=anime.streams(get_session(), id, episode, language))
    except ProxerError as e:
        return error_from(e)


def register_tools(mcp):
    mcp.tool()(manga_chapter)
    mcp.tool()(anime_streams)
