# spotilocal/errors.py


class SpotifyError(Exception):
    """Base class for every error raised by spotilocal."""


class TransportError(SpotifyError):
    """The HTTP request could not be completed."""


class MalformedResponse(SpotifyError):
    """The response body was not valid JSON."""


class MissingCredential(SpotifyError):
    """A well-formed handshake response did not carry the expected token."""


class InvalidBearerToken(MissingCredential):
    """The token issuer's response has no usable `t` field."""


class InvalidAntiForgeryToken(MissingCredential):
    """The local CSRF endpoint's response has no usable `token` field."""


class EndpointNotFound(SpotifyError):
    """No port in the candidate range is occupied by the web helper."""

    def __init__(self, start: int, end: int):
        super().__init__(f"No local Spotify endpoint found on ports {start}-{end}")
        self.start = start
        self.end = end


class ClientNotRunning(SpotifyError):
    """The Spotify desktop client process is not running."""


class WebHelperNotRunning(SpotifyError):
    """The SpotifyWebHelper process is not running."""
