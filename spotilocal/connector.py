# spotilocal/connector.py
import os
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple

import requests

from .debug import debug_log
from .endpoint import resolve_port
from .errors import (
    InvalidAntiForgeryToken,
    InvalidBearerToken,
    MalformedResponse,
    TransportError,
)


# The web helper only answers requests that look like they come from the
# embedded web player.
USER_AGENT = "Mozilla/5.0 (Windows; rv:50.0) Gecko/20100101 Firefox/50.0"
ORIGIN = "https://embed.spotify.com"
REFERER = "https://embed.spotify.com/track/4uLU6hMCjMI75M1A2tKUQC"
HEADERS = {
    "User-Agent": USER_AGENT,
    "Origin": ORIGIN,
    "Referer": REFERER,
}

TOKEN_URL = "https://open.spotify.com/token"
LOCAL_HOST = "localhost.spotilocal.com"
CSRF_PATH = "simplecsrf/token.json"

_timeout = os.getenv("SPOTILOCAL_TIMEOUT", "").strip()
REQUEST_TIMEOUT: Optional[float] = float(_timeout) if _timeout else None


def build_url(
    base: str,
    path: str,
    oauth: Optional[str] = None,
    csrf: Optional[str] = None,
    params: Iterable[Tuple[str, Any]] = (),
) -> str:
    """
    Build a request url for the web helper.

    Every url carries the empty `ref`/`cors` pair and an `_` cache buster
    with the current unix time. The OAuth and CSRF tokens are appended only
    when given, followed by `params` as-is and in order.
    """
    url = base + path
    url += "&" if "?" in path else "?"
    url += f"ref=&cors=&_={int(time.time())}"
    if oauth is not None:
        url += f"&oauth={oauth}"
    if csrf is not None:
        url += f"&csrf={csrf}"
    for name, value in params:
        url += f"&{name}={value}"
    return url


def local_base_url(port: int) -> str:
    return f"http://{LOCAL_HOST}:{port}/"


class Transport:
    """
    The one HTTP client shared by the handshake, one-shot calls and the
    polling reactor. Requests are serialized on a lock.
    """

    def __init__(self, http: Optional[requests.Session] = None, timeout: Optional[float] = REQUEST_TIMEOUT):
        self._http = http or requests.Session()
        self._lock = threading.Lock()
        self.timeout = timeout

    def get_json(self, url: str) -> Any:
        # Never echo the query string; it carries the session tokens.
        endpoint = url.split("?")[0]
        with self._lock:
            try:
                r = self._http.get(url, headers=HEADERS, timeout=self.timeout)
                r.raise_for_status()
            except requests.RequestException as e:
                raise TransportError(f"GET {endpoint} failed: {_describe(e)}") from None

            try:
                return r.json()
            except ValueError as e:
                raise MalformedResponse(f"GET {endpoint} returned invalid JSON") from e

    def close(self) -> None:
        # Does not wait for an in-flight request.
        self._http.close()


def _describe(error: requests.RequestException) -> str:
    response = getattr(error, "response", None)
    if response is not None:
        return f"HTTP {response.status_code}"
    return type(error).__name__


@dataclass(frozen=True)
class Session:
    port: int
    oauth_token: str
    csrf_token: str

    @property
    def base_url(self) -> str:
        return local_base_url(self.port)

    def url(self, path: str, signed: bool = True, params: Iterable[Tuple[str, Any]] = ()) -> str:
        if signed:
            return build_url(self.base_url, path, oauth=self.oauth_token, csrf=self.csrf_token, params=params)
        return build_url(self.base_url, path, params=params)


def _token(data: Any, key: str) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    value = data.get(key)
    if isinstance(value, str) and value:
        return value
    return None


class SessionHandshake:
    """
    Two-stage token handshake with the web helper.

    `establish()` resolves the local port, fetches the OAuth token from the
    public token endpoint, then the CSRF token from the helper itself. A
    Session is returned only once both tokens are in hand; any failure
    raises and nothing is kept.
    """

    def __init__(self, transport: Transport, resolver: Callable[[], int] = resolve_port):
        self.transport = transport
        self.resolver = resolver

    def establish(self) -> Session:
        port = self.resolver()
        oauth_token = self._fetch_oauth_token()
        csrf_token = self._fetch_csrf_token(port)
        debug_log(f"Session established on port {port}")
        return Session(port=port, oauth_token=oauth_token, csrf_token=csrf_token)

    def _fetch_oauth_token(self) -> str:
        data = self.transport.get_json(TOKEN_URL)
        token = _token(data, "t")
        if token is None:
            raise InvalidBearerToken("Token response has no 't' field")
        debug_log("OAuth token acquired")
        return token

    def _fetch_csrf_token(self, port: int) -> str:
        data = self.transport.get_json(build_url(local_base_url(port), CSRF_PATH))
        token = _token(data, "token")
        if token is None:
            raise InvalidAntiForgeryToken("CSRF response has no 'token' field")
        debug_log("CSRF token acquired")
        return token
