#main.py
import sys

from spotilocal import Spotify, SpotifyError, Status, StatusChange


def describe(status: Status, change: StatusChange) -> list:
    lines = []
    if change.track:
        track = status.simple_track()
        lines.append(f"Track: {track}" if track else "Track: (none)")
    if change.playing:
        lines.append("Playing" if status.playing else "Paused")
    if change.volume:
        lines.append(f"Volume: {int(round(status.volume * 100))}%")
    if change.online:
        lines.append("Online" if status.online else "Offline")
    return lines


def on_status(status: Status, change: StatusChange) -> bool:
    for line in describe(status, change):
        print(f"[Spotify] {line}")
    return True


def main():
    try:
        spotify = Spotify.connect()
    except SpotifyError as e:
        print(f"[Spotify] Connect failed: {e}")
        sys.exit(1)

    print(f"[Spotify] Connected on port {spotify.port}. Watching… (Ctrl+C to stop)")

    reactor = spotify.poll(on_status)
    try:
        while reactor.is_alive():
            reactor.join(timeout=1.0)
    except KeyboardInterrupt:
        print("\n[Spotify] Stopped.")
    finally:
        spotify.close()


if __name__ == "__main__":
    main()
