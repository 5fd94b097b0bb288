# spotilocal/models.py
from dataclasses import dataclass, fields
from typing import Optional


@dataclass(frozen=True)
class Resource:
    uri: str
    name: str
    location: str  # open.spotify.com url


@dataclass(frozen=True)
class SimpleTrack:
    """
    Display-oriented view of a Track: just the three names.
    """
    name: str
    album: str
    artist: str

    def __str__(self) -> str:
        return f"{self.artist} - {self.name}"


@dataclass(frozen=True)
class Track:
    track: Resource
    album: Resource
    artist: Resource
    length: int  # seconds
    track_type: str  # filled from the track object's "uri" field

    def simple(self) -> SimpleTrack:
        return SimpleTrack(
            name=self.track.name,
            album=self.album.name,
            artist=self.artist.name,
        )


@dataclass(frozen=True)
class OpenGraphState:
    private_session: bool
    posting_disabled: bool


@dataclass(frozen=True)
class Status:
    volume: float  # 0.0 - 1.0
    online: bool
    version: int  # protocol version
    running: bool
    playing: bool
    shuffle: bool
    server_time: int  # unix seconds
    play_enabled: bool
    prev_enabled: bool
    next_enabled: bool
    client_version: str
    playing_position: float  # seconds
    open_graph_state: OpenGraphState
    track: Optional[Track]

    def simple_track(self) -> Optional[SimpleTrack]:
        if self.track is None:
            return None
        return self.track.simple()


@dataclass(frozen=True)
class StatusChange:
    """
    One flag per Status field, set when that field differs between two
    consecutive statuses.
    """
    volume: bool
    online: bool
    version: bool
    running: bool
    playing: bool
    shuffle: bool
    server_time: bool
    play_enabled: bool
    prev_enabled: bool
    next_enabled: bool
    client_version: bool
    playing_position: bool
    open_graph_state: bool
    track: bool

    @classmethod
    def everything(cls) -> "StatusChange":
        return cls(**{f.name: True for f in fields(cls)})

    @classmethod
    def between(cls, current: Status, previous: Status) -> "StatusChange":
        return cls(**{
            f.name: getattr(current, f.name) != getattr(previous, f.name)
            for f in fields(cls)
        })

    def any(self) -> bool:
        return any(getattr(self, f.name) for f in fields(self))

    def changed(self) -> list:
        return [f.name for f in fields(self) if getattr(self, f.name)]
