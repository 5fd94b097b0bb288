# spotilocal/process.py
from abc import ABC, abstractmethod

import psutil


CLIENT_PROCESS = "Spotify.exe"
WEBHELPER_PROCESS = "SpotifyWebHelper.exe"


class ProcessProbe(ABC):
    """
    Answers whether a process with a given executable name is running.
    """

    @abstractmethod
    def is_running(self, name: str) -> bool:
        pass


class PsutilProcessProbe(ProcessProbe):
    def is_running(self, name: str) -> bool:
        wanted = name.lower()
        for proc in psutil.process_iter(["name"]):
            proc_name = proc.info.get("name") or ""
            if proc_name.lower() == wanted:
                return True
        return False
