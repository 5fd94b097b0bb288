# spotilocal/endpoint.py
import os
import socket

from .debug import debug_log
from .errors import EndpointNotFound


LOOPBACK = "127.0.0.1"
PORT_START = int(os.getenv("SPOTILOCAL_PORT_START", "4370"))
PORT_END = int(os.getenv("SPOTILOCAL_PORT_END", "4399"))


def _port_in_use(port: int, host: str = LOOPBACK) -> bool:
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        probe.bind((host, port))
    except OSError:
        return True
    finally:
        probe.close()
    return False


def resolve_port(start: int = PORT_START, end: int = PORT_END) -> int:
    """
    Find the port the web helper listens on.

    Ports are probed in ascending order, `end` included. The first port we
    cannot bind ourselves is taken to be the helper's, so an unrelated
    process holding a lower port in the range wins instead.
    """
    for port in range(start, end + 1):
        if _port_in_use(port):
            debug_log(f"Local endpoint found on port {port}")
            return port
    raise EndpointNotFound(start, end)
