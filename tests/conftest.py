"""
Shared fixtures for the bot hosting tests.

Every test gets its own record file, scripts directory and process registry
under pytest's tmp_path. Bots are launched with the interpreter running the
tests, whatever their extension.
"""

import io
import shlex
import sys
import time

import pytest

from backend.controllers import BotController, UploadController
from backend.libs.record_store import BotStore
from bots.factory import ScriptKind
from bots.registry import BotRegistry

PYTHON_LAUNCHER = shlex.quote(sys.executable)

LAUNCHERS = {
    ScriptKind.PYTHON: PYTHON_LAUNCHER,
    ScriptKind.NODE: PYTHON_LAUNCHER,
}

LONG_RUNNING_SCRIPT = b"import time\nwhile True:\n    time.sleep(0.1)\n"
SHORT_SCRIPT = b"print('hello from bot')\n"


def wait_until(predicate, timeout: float = 5.0, interval: float = 0.05) -> bool:
    """Poll `predicate` until it returns True or the timeout expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()


@pytest.fixture
def store(tmp_path):
    """Record store backed by a file that does not exist yet."""
    return BotStore(tmp_path / "data" / "bots.json")


@pytest.fixture
def bots_dir(tmp_path):
    return tmp_path / "user_bots"


@pytest.fixture
def registry():
    """Fresh process registry; any process left running is terminated."""
    registry = BotRegistry()
    yield registry
    registry.stop_all()


@pytest.fixture
def uploader(store, registry, bots_dir):
    return UploadController(store, registry, bots_dir)


@pytest.fixture
def controller(store, registry):
    return BotController(store, registry, launchers=LAUNCHERS)


@pytest.fixture
def upload_script(uploader):
    """Upload a script for alice and return its bot id."""

    def _upload(
        source: bytes = LONG_RUNNING_SCRIPT,
        username: str = "alice",
        bot_name: str = "echoBot",
        filename: str = "bot.py",
    ) -> str:
        return uploader.upload_bot(username, bot_name, filename, io.BytesIO(source))

    return _upload
