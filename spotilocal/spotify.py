# spotilocal/spotify.py
import sys
from typing import Any, Callable, Optional

from . import actions
from .connector import Session, SessionHandshake, Transport
from .endpoint import resolve_port
from .errors import ClientNotRunning, WebHelperNotRunning
from .models import Status
from .process import CLIENT_PROCESS, WEBHELPER_PROCESS, ProcessProbe, PsutilProcessProbe
from .reactor import POLL_SECONDS, PollingReactor, StatusHandler
from .status import fetch_status, fetch_status_json


class Spotify:
    """
    Handle on an authenticated web helper session.

    Build one with `Spotify.connect()`. One-shot calls block the calling
    thread; `poll()` starts a background reactor sharing the same transport.
    """

    def __init__(self, session: Session, transport: Transport):
        self._session = session
        self._transport = transport

    @classmethod
    def connect(
        cls,
        transport: Optional[Transport] = None,
        probe: Optional[ProcessProbe] = None,
        resolver: Callable[[], int] = resolve_port,
    ) -> "Spotify":
        # Process names are only known for the Windows client.
        if sys.platform == "win32":
            probe = probe or PsutilProcessProbe()
            if not probe.is_running(CLIENT_PROCESS):
                raise ClientNotRunning(f"{CLIENT_PROCESS} is not running")
            if not probe.is_running(WEBHELPER_PROCESS):
                raise WebHelperNotRunning(f"{WEBHELPER_PROCESS} is not running")
        return cls.connect_unchecked(transport=transport, resolver=resolver)

    @classmethod
    def connect_unchecked(
        cls,
        transport: Optional[Transport] = None,
        resolver: Callable[[], int] = resolve_port,
    ) -> "Spotify":
        transport = transport or Transport()
        session = SessionHandshake(transport, resolver).establish()
        return cls(session, transport)

    @property
    def port(self) -> int:
        return self._session.port

    @property
    def oauth_token(self) -> str:
        return self._session.oauth_token

    @property
    def csrf_token(self) -> str:
        return self._session.csrf_token

    def status(self) -> Status:
        return fetch_status(self._transport, self._session)

    def status_json(self) -> Any:
        return fetch_status_json(self._transport, self._session)

    def play(self, track: str) -> bool:
        return actions.play(self._transport, self._session, track)

    def pause(self) -> bool:
        return actions.pause(self._transport, self._session)

    def resume(self) -> bool:
        return actions.resume(self._transport, self._session)

    def open(self) -> bool:
        return actions.open_client(self._transport, self._session)

    def poll(self, handler: StatusHandler, poll_seconds: float = POLL_SECONDS) -> PollingReactor:
        reactor = PollingReactor(self.status, handler, poll_seconds=poll_seconds)
        reactor.start()
        return reactor

    def close(self) -> None:
        self._transport.close()
