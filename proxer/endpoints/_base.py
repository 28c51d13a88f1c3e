"""Request helper shared by the endpoint modules."""

from typing import Any, Callable, Optional, Tuple

from ..core.envelope import SUCCESS, check, unwrap
from ..core.http_client import Session
from ..core.params import build_body


def call(
    session: Session,
    category: str,
    action: str,
    *pairs: Tuple[str, Optional[Any]],
    normalize: Optional[Callable[[Any], Any]] = None,
    expected: int = SUCCESS,
) -> Any:
    """POST one action and return its unwrapped payload."""
    r = session.send(session.url(category, action), build_body(*pairs))
    return unwrap(r.content, normalize, expected)


def call_void(session: Session, category: str, action: str, *pairs: Tuple[str, Optional[Any]]) -> None:
    """POST an action whose success envelope carries no payload."""
    r = session.send(session.url(category, action), build_body(*pairs))
    check(r.content)
