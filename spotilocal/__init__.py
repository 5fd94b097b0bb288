from .actions import normalize_track_uri
from .connector import Session, SessionHandshake, Transport, build_url
from .endpoint import resolve_port
from .errors import (
    ClientNotRunning,
    EndpointNotFound,
    InvalidAntiForgeryToken,
    InvalidBearerToken,
    MalformedResponse,
    MissingCredential,
    SpotifyError,
    TransportError,
    WebHelperNotRunning,
)
from .models import OpenGraphState, Resource, SimpleTrack, Status, StatusChange, Track
from .reactor import PollingReactor, ReactorState
from .spotify import Spotify
from .status import diff, fetch_status, status_from_json

__version__ = "0.1.0"
