"""Client facade binding every endpoint module to one Session."""

import functools
import inspect
import logging
from types import ModuleType
from typing import Optional

from .core.http_client import Session
from .endpoints import anime, info, manga, media, messenger, notification, ucp, user
from .endpoints import list as list_

logger = logging.getLogger(__name__)


def _takes_session(fn) -> bool:
    params = list(inspect.signature(fn).parameters)
    return bool(params) and params[0] == "session"


class _Category:
    """Endpoint module whose request functions are bound to a session.

    Helpers that do not take a session (URL builders, constants) pass through.
    """

    def __init__(self, session: Session, module: ModuleType):
        self._session = session
        self._module = module

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)
        attr = getattr(self._module, name)
        if inspect.isfunction(attr) and _takes_session(attr):
            return functools.partial(attr, self._session)
        return attr

    def __dir__(self):
        return [n for n in dir(self._module) if not n.startswith("_")]

    def __repr__(self) -> str:
        return f"<{self._module.__name__} bound to {self._session!r}>"


class Proxer:
    """Entry point: `Proxer(api_key).manga.chapter(id=..., episode=...)`.

    Extra keyword arguments go to `Session`. Proxer asks third-party
    applications to present themselves as unofficial, which is logged once
    per client.
    """

    def __init__(self, api_key: Optional[str] = None, session: Optional[Session] = None, **session_kw):
        if session is None:
            if not api_key:
                raise ValueError("api_key or session is required")
            session = Session(api_key, **session_kw)
        self.session = session
        logger.info("proxer-py is an unofficial Proxer.me client")
        self.anime = _Category(session, anime)
        self.info = _Category(session, info)
        self.list = _Category(session, list_)
        self.manga = _Category(session, manga)
        self.media = _Category(session, media)
        self.messenger = _Category(session, messenger)
        self.notification = _Category(session, notification)
        self.ucp = _Category(session, ucp)
        self.user = _Category(session, user)

    @classmethod
    def from_env(cls) -> "Proxer":
        return cls(session=Session.from_env())

    def __enter__(self) -> "Proxer":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()
