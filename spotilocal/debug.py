# spotilocal/debug.py
#
# Set SPOTILOCAL_DEBUG=1 to trace the handshake and the polling thread.
# Lines go to stdout and to SPOTILOCAL_DEBUG_LOG, or to
# spotilocal_debug.log in the working directory when that is unset.
import os
import threading
import time
from pathlib import Path


_DEBUG = os.getenv("SPOTILOCAL_DEBUG") == "1"
DEFAULT_LOG_NAME = "spotilocal_debug.log"


def debug_log_path() -> Path:
    configured = os.getenv("SPOTILOCAL_DEBUG_LOG", "").strip()
    if configured:
        return Path(configured)
    return Path.cwd() / DEFAULT_LOG_NAME


def debug_log(message: str) -> None:
    if not _DEBUG:
        return

    ts = time.strftime("%Y-%m-%d %H:%M:%S")
    line = f"[{ts}] [{threading.current_thread().name}] {message}"
    try:
        with debug_log_path().open("a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError:
        pass

    print(f"[DEBUG] {line}")
