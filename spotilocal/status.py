# spotilocal/status.py
#
# Maps the web helper's status JSON onto the typed models. Every field has
# its own extractor; a missing or mistyped value becomes the zero value of
# the field's type instead of an error.
import math
from typing import Any, Optional

from .connector import Session, Transport
from .models import OpenGraphState, Resource, Status, StatusChange, Track


STATUS_PATH = "remote/status.json"


def _field(obj: Any, key: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(key)
    return None


def _obj(obj: Any, key: str) -> dict:
    value = _field(obj, key)
    return value if isinstance(value, dict) else {}


def _bool(obj: Any, key: str) -> bool:
    return _field(obj, key) is True


def _int(obj: Any, key: str) -> int:
    value = _field(obj, key)
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _float(obj: Any, key: str) -> float:
    value = _field(obj, key)
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            value = float(value)
        except OverflowError:
            return 0.0
        # the decoder lets NaN and Infinity through
        return value if math.isfinite(value) else 0.0
    return 0.0


def _str(obj: Any, key: str) -> str:
    value = _field(obj, key)
    return value if isinstance(value, str) else ""


def resource_from_json(data: Any) -> Resource:
    return Resource(
        uri=_str(data, "uri"),
        name=_str(data, "name"),
        location=_str(_obj(data, "location"), "og"),
    )


def track_from_json(data: Any) -> Optional[Track]:
    if not isinstance(data, dict):
        return None
    return Track(
        track=resource_from_json(_obj(data, "track_resource")),
        album=resource_from_json(_obj(data, "album_resource")),
        artist=resource_from_json(_obj(data, "artist_resource")),
        length=_int(data, "length"),
        track_type=_str(data, "uri"),
    )


def open_graph_from_json(data: Any) -> OpenGraphState:
    return OpenGraphState(
        private_session=_bool(data, "private_session"),
        posting_disabled=_bool(data, "posting_disabled"),
    )


def status_from_json(data: Any) -> Status:
    return Status(
        volume=_float(data, "volume"),
        online=_bool(data, "online"),
        version=_int(data, "version"),
        running=_bool(data, "running"),
        playing=_bool(data, "playing"),
        shuffle=_bool(data, "shuffle"),
        server_time=_int(data, "server_time"),
        play_enabled=_bool(data, "play_enabled"),
        prev_enabled=_bool(data, "prev_enabled"),
        next_enabled=_bool(data, "next_enabled"),
        client_version=_str(data, "client_version"),
        playing_position=_float(data, "playing_position"),
        open_graph_state=open_graph_from_json(_obj(data, "open_graph_state")),
        track=track_from_json(_field(data, "track")),
    )


def fetch_status_json(transport: Transport, session: Session) -> Any:
    return transport.get_json(session.url(STATUS_PATH))


def fetch_status(transport: Transport, session: Session) -> Status:
    return status_from_json(fetch_status_json(transport, session))


def diff(current: Status, previous: Status) -> StatusChange:
    return StatusChange.between(current, previous)
