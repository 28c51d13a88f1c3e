"""MCP tools over the Proxer endpoints."""

from . import news
from . import media
from . import entries
from . import meta

__all__ = [
    "news",
    "media",
    "entries",
    "meta",
]
