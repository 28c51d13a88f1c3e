"""Manga endpoints. Access to this category is restricted by the service."""

from typing import List, Optional

from ..core.http_client import Session
from ..core.normalizers import many, norm_chapter
from ..models.types import Chapter, Page
from ._base import call

CATEGORY = "manga"
PAGE_URL = "https://manga{server}.proxer.me/f/{eid}/{cid}/{name}"


def chapter(session: Session, id: int, episode: int, language: Optional[str] = None) -> List[Chapter]:
    """
    One chapter of a manga entry.

    id: entry id. episode: chapter number. language: "de" or "en".
    A logged-in user earns manga points for reading.
    """
    return call(
        session, CATEGORY, "chapter",
        ("id", id), ("episode", episode), ("language", language),
        normalize=_chapters,
    )


def _chapters(data) -> List[Chapter]:
    # single chapters come back as an object, not a list
    if isinstance(data, dict):
        data = [data]
    return many(norm_chapter)(data)


def page_url(ch: Chapter, page: Page) -> str:
    return PAGE_URL.format(server=ch["server"], eid=ch["eid"], cid=ch["cid"], name=page["name"])
