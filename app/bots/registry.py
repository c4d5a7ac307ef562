from subprocess import Popen
from threading import Lock
from typing import Dict


class BotRegistry:
    """Volatile map of bot id to the live child process running it

    Presence in the registry is the ground truth for liveness. Entries are
    removed by stop/delete and by the exit observer of each process; nothing
    is persisted, so a restarted service starts empty.
    """

    def __init__(self):
        self._bots: Dict[str, Popen] = {}
        self._lock = Lock()

    # --------- CRUD runtime ---------

    def register(self, bot_id: str, process: Popen) -> bool:
        """Register `process` for `bot_id`, refusing if an entry already exists"""
        with self._lock:
            if bot_id in self._bots:
                return False
            self._bots[bot_id] = process
            return True

    def unregister(self, bot_id: str, process: Popen | None = None) -> Popen | None:
        """Remove and return the entry of `bot_id`

        When `process` is given, the entry is only removed if it still holds
        that exact process.
        """
        with self._lock:
            current = self._bots.get(bot_id)
            if current is None or (process is not None and current is not process):
                return None
            return self._bots.pop(bot_id)

    def get(self, bot_id: str) -> Popen | None:
        with self._lock:
            return self._bots.get(bot_id)

    def list_ids(self) -> list[str]:
        with self._lock:
            return list(self._bots.keys())

    # --------- Status ---------

    def is_running(self, bot_id: str) -> bool:
        with self._lock:
            return bot_id in self._bots

    def count(self) -> int:
        with self._lock:
            return len(self._bots)

    # --------- Cleanup ---------

    def stop_all(self) -> list[str]:
        """Terminate every registered process and clear the registry"""
        with self._lock:
            stopped = list(self._bots.keys())
            for process in self._bots.values():
                if process.poll() is None:
                    process.terminate()
            self._bots.clear()
        return stopped
