"""Media endpoints: site headers."""

from typing import List, Optional

from ..core.http_client import Session
from ..core.normalizers import many, norm_header
from ..models.types import Header
from ._base import call

CATEGORY = "media"
HEADER_URL = "https://cdn.proxer.me/gallery/originals/{path}/{img}"


def random_header(session: Session, style: Optional[str] = None) -> Header:
    """style: gray, black, old_blue, pantsu or blue (default)."""
    return call(session, CATEGORY, "randomheader", ("style", style), normalize=norm_header)


def header_list(session: Session) -> List[Header]:
    return call(session, CATEGORY, "headerlist", normalize=many(norm_header))


def header_url(header: Header) -> str:
    return HEADER_URL.format(path=header["path"], img=header["img"])
