# spotilocal/actions.py
from typing import Any, Iterable, Tuple

from .connector import Session, Transport
from .debug import debug_log
from .errors import SpotifyError


PLAY_PATH = "remote/play.json"
PAUSE_PATH = "remote/pause.json"
OPEN_PATH = "remote/open.json"

_URI_PREFIXES = (
    "http://",
    "open.spotify.com",
    "play.spotify.com",
)


def normalize_track_uri(track: str) -> str:
    """
    Turn a web link, a `type/id` path or a spotify uri into `spotify:type:id`.

    Best effort only: anything unrecognised is passed through in whatever
    shape the rewriting leaves it.
    """
    uri = track.strip().replace("https://", "http://")
    for prefix in _URI_PREFIXES:
        if uri.startswith(prefix):
            uri = uri[len(prefix):]
    uri = uri.replace("/", ":")
    if uri.startswith(":"):
        uri = uri[1:]
    if not uri.startswith("spotify:"):
        uri = "spotify:" + uri
    return uri


def _send(transport: Transport, session: Session, path: str, params: Iterable[Tuple[str, Any]]) -> bool:
    try:
        data = transport.get_json(session.url(path, params=params))
    except SpotifyError as e:
        debug_log(f"{path} failed: {e}")
        return False

    if isinstance(data, dict) and data.get("error"):
        debug_log(f"{path} rejected: {data['error']}")
        return False
    return True


def play(transport: Transport, session: Session, track: str) -> bool:
    return _send(transport, session, PLAY_PATH, [("uri", normalize_track_uri(track))])


def pause(transport: Transport, session: Session) -> bool:
    return _send(transport, session, PAUSE_PATH, [("pause", "true")])


def resume(transport: Transport, session: Session) -> bool:
    return _send(transport, session, PAUSE_PATH, [("pause", "false")])


def open_client(transport: Transport, session: Session) -> bool:
    """Ask the web helper whether the client is open; False on any failure."""
    try:
        data = transport.get_json(session.url(OPEN_PATH, signed=False))
    except SpotifyError as e:
        debug_log(f"{OPEN_PATH} failed: {e}")
        return False
    return isinstance(data, dict) and data.get("running") is True
