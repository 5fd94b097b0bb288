import socket
import sys
import unittest
from pathlib import Path
from unittest import mock


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from spotilocal.endpoint import resolve_port
from spotilocal.errors import EndpointNotFound


def _free_port() -> int:
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.bind(("127.0.0.1", 0))
    port = s.getsockname()[1]
    s.close()
    return port


class ResolvePortTests(unittest.TestCase):
    def test_returns_port_held_by_listener(self) -> None:
        listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.addCleanup(listener.close)
        listener.bind(("127.0.0.1", 0))
        listener.listen(1)
        port = listener.getsockname()[1]

        self.assertEqual(resolve_port(port, port), port)

    def test_raises_when_nothing_listens(self) -> None:
        port = _free_port()
        with self.assertRaises(EndpointNotFound) as ctx:
            resolve_port(port, port)
        self.assertEqual(ctx.exception.start, port)
        self.assertEqual(ctx.exception.end, port)

    def test_scans_ascending_and_stops_at_first_hit(self) -> None:
        probed: list[int] = []

        def in_use(port: int) -> bool:
            probed.append(port)
            return port in {4375, 4380}

        with mock.patch("spotilocal.endpoint._port_in_use", side_effect=in_use):
            self.assertEqual(resolve_port(4370, 4399), 4375)
        self.assertEqual(probed, [4370, 4371, 4372, 4373, 4374, 4375])

    def test_upper_bound_is_inclusive(self) -> None:
        with mock.patch("spotilocal.endpoint._port_in_use", side_effect=lambda port: port == 4399):
            self.assertEqual(resolve_port(4370, 4399), 4399)

    def test_empty_range_raises(self) -> None:
        with mock.patch("spotilocal.endpoint._port_in_use", return_value=False):
            with self.assertRaises(EndpointNotFound):
                resolve_port(4370, 4399)


if __name__ == "__main__":
    unittest.main()
