"""HTTP session and network functions for the Proxer API."""

import logging
import os
import ssl
import threading
import time
from importlib.metadata import version, PackageNotFoundError
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

import requests

from .errors import ConnectError, TransportError

logger = logging.getLogger(__name__)

try:
    __VERSION__ = version("proxer-py")
except PackageNotFoundError:
    __VERSION__ = "0.0.0+dev"

# Constants
BASE_URL = "https://proxer.me/api"
API_VERSION = "v1"
LEGACY_NEWS_URL = "http://proxer.me/notifications"
DEFAULT_TIMEOUT = 15
API_TOKEN_HEADER = "proxer-api-token"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
UA = f"proxer-py/{__VERSION__} (+https://github.com/souryo/proxer-py)"


def api_url(category: str, action: str, base_url: str = BASE_URL, api_version: str = API_VERSION) -> str:
    """Endpoint URL for one category/action pair."""
    return f"{base_url.rstrip('/')}/{api_version}/{category}/{action}"


def _check_tls(verify: Union[bool, str]) -> None:
    """Build the TLS context once up front so a broken trust store fails early."""
    if verify is False:
        return
    cafile = capath = None
    if isinstance(verify, str):
        if os.path.isdir(verify):
            capath = verify
        elif os.path.isfile(verify):
            cafile = verify
        else:
            raise ConnectError(f"CA bundle not found: {verify}")
    else:
        cafile = requests.certs.where()
    try:
        ssl.create_default_context(cafile=cafile, capath=capath)
    except (ssl.SSLError, OSError) as e:
        raise ConnectError(f"cannot build TLS context: {e}") from e


class Session:
    """Blocking transport bound to one API key.

    Headers are fixed at construction. `min_interval` spaces out request
    starts by at least that many seconds; the service asks clients to keep
    their request volume low.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        min_interval: float = 0.0,
        verify: Union[bool, str] = True,
    ):
        _check_tls(verify)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.min_interval = max(0.0, float(min_interval))
        self.headers: Mapping[str, str] = MappingProxyType({
            "Content-Type": FORM_CONTENT_TYPE,
            "User-Agent": UA,
            API_TOKEN_HEADER: api_key,
        })
        try:
            http = requests.Session()
        except Exception as e:
            raise ConnectError(f"cannot create HTTP session: {e}") from e
        http.headers.update(self.headers)
        http.verify = verify
        self._http = http
        self._lock = threading.Lock()
        self._last_request = 0.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Session":
        """Session configured from PROXER_* environment variables."""
        env = os.environ if environ is None else environ
        api_key = env.get("PROXER_API_KEY")
        if not api_key:
            raise ConnectError("PROXER_API_KEY is not set")
        try:
            timeout = float(env.get("PROXER_TIMEOUT", DEFAULT_TIMEOUT))
            min_interval = float(env.get("PROXER_MIN_INTERVAL", 0.0))
        except ValueError as e:
            raise ConnectError(f"invalid PROXER_TIMEOUT or PROXER_MIN_INTERVAL: {e}") from e
        return cls(
            api_key,
            base_url=env.get("PROXER_BASE_URL", BASE_URL),
            timeout=timeout,
            min_interval=min_interval,
        )

    def __repr__(self) -> str:
        return f"<Session {self.base_url}>"

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def url(self, category: str, action: str) -> str:
        return api_url(category, action, self.base_url)

    def send(self, url: str, body: str = "") -> requests.Response:
        """POST a form-encoded body to `url`."""
        return self._request("POST", url, data=body)

    def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        """GET without the API key; the legacy feed is public and served over plain HTTP."""
        return self._request("GET", url, params=params, headers={API_TOKEN_HEADER: None})

    def _throttle(self) -> None:
        if self.min_interval <= 0:
            return
        with self._lock:
            wait = self._last_request + self.min_interval - time.monotonic()
            if wait > 0:
                logger.debug("throttling %.2fs", wait)
                time.sleep(wait)
            self._last_request = time.monotonic()

    def _request(self, method: str, url: str, **kw) -> requests.Response:
        self._throttle()
        logger.debug("%s %s", method, url)
        try:
            r = self._http.request(method, url, timeout=self.timeout, **kw)
        except requests.Timeout as e:
            raise TransportError(f"{method} {url} timed out") from e
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        if r.status_code >= 400:
            raise TransportError(f"{r.status_code} upstream", status_code=r.status_code)
        return r
