# spotilocal/reactor.py
import enum
import os
import threading
import time
from typing import Callable, Optional

from .debug import debug_log
from .errors import SpotifyError
from .models import Status, StatusChange
from .status import diff


POLL_SECONDS = float(os.getenv("SPOTILOCAL_POLL_SECONDS", "0.25"))

StatusHandler = Callable[[Status, StatusChange], bool]


class ReactorState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class PollingReactor(threading.Thread):
    """
    Background loop that polls the web helper and reports changes.

    Each cycle fetches a Status and hands it to `handler` together with what
    changed since the last successful fetch. The first successful fetch is
    reported with every field marked as changed. A failed fetch is skipped
    without calling the handler. The loop ends when the handler returns a
    falsy value; a stopped reactor cannot be started again.
    """

    def __init__(
        self,
        fetch: Callable[[], Status],
        handler: StatusHandler,
        poll_seconds: float = POLL_SECONDS,
    ):
        super().__init__(name="spotilocal-reactor", daemon=True)
        self._fetch = fetch
        self._handler = handler
        self.poll_seconds = poll_seconds
        self.state = ReactorState.IDLE
        self.last_status: Optional[Status] = None

    def start(self) -> None:
        if self.state is not ReactorState.IDLE:
            raise RuntimeError(f"Reactor is {self.state.value} and cannot be started")
        self.state = ReactorState.RUNNING
        super().start()

    def run(self) -> None:
        try:
            while True:
                try:
                    status = self._fetch()
                except SpotifyError as e:
                    debug_log(f"Status poll skipped: {e}")
                    time.sleep(self.poll_seconds)
                    continue

                if self.last_status is None:
                    change = StatusChange.everything()
                else:
                    change = diff(status, self.last_status)
                self.last_status = status

                if not self._handler(status, change):
                    debug_log("Status handler asked to stop")
                    break

                time.sleep(self.poll_seconds)
        finally:
            self.state = ReactorState.STOPPED
