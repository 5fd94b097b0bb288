import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from spotilocal import debug


class DebugLogTests(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory(prefix="spotilocal_debug_")
        self.addCleanup(self.temp_dir.cleanup)
        self.log_path = Path(self.temp_dir.name) / "trace.log"

    def test_disabled_writes_nothing(self) -> None:
        with mock.patch.object(debug, "_DEBUG", False), \
                mock.patch.dict(os.environ, {"SPOTILOCAL_DEBUG_LOG": str(self.log_path)}):
            debug.debug_log("hello")
        self.assertFalse(self.log_path.exists())

    def test_enabled_appends_to_configured_file(self) -> None:
        with mock.patch.object(debug, "_DEBUG", True), \
                mock.patch.dict(os.environ, {"SPOTILOCAL_DEBUG_LOG": str(self.log_path)}), \
                mock.patch("builtins.print") as printed:
            debug.debug_log("port 4370")
            debug.debug_log("session established")

        lines = self.log_path.read_text(encoding="utf-8").splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].endswith("[MainThread] port 4370"))
        self.assertEqual(printed.call_count, 2)

    def test_default_path_is_working_directory_not_package(self) -> None:
        env = {k: v for k, v in os.environ.items() if k != "SPOTILOCAL_DEBUG_LOG"}
        with mock.patch.dict(os.environ, env, clear=True), \
                mock.patch("spotilocal.debug.Path.cwd", return_value=Path(self.temp_dir.name)):
            path = debug.debug_log_path()
        self.assertEqual(path, Path(self.temp_dir.name) / "spotilocal_debug.log")

    def test_unwritable_log_does_not_raise(self) -> None:
        missing = Path(self.temp_dir.name) / "no" / "such" / "dir" / "trace.log"
        with mock.patch.object(debug, "_DEBUG", True), \
                mock.patch.dict(os.environ, {"SPOTILOCAL_DEBUG_LOG": str(missing)}), \
                mock.patch("builtins.print"):
            debug.debug_log("still fine")
        self.assertFalse(missing.exists())


if __name__ == "__main__":
    unittest.main()
