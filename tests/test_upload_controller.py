"""
Tests for script uploads: id derivation, storage layout and validation.
"""

import io
import re

import pytest

from backend.controllers.common import UploadValidationError
from backend.controllers.upload_controller import make_bot_id
from backend.models.bot import BotStatus


def test_bot_id_contains_owner_name_and_timestamp(upload_script):
    bot_id = upload_script(username="alice", bot_name="echoBot")

    assert re.fullmatch(r"alice_echoBot_\d+", bot_id)


def test_bot_id_collapses_whitespace():
    bot_id = make_bot_id("bob  smith", "my\tfirst bot", created_ms=1704110400000)

    assert bot_id == "bob_smith_my_first_bot_1704110400000"
    assert not re.search(r"\s", bot_id)


def test_upload_stores_file_under_owner_directory(upload_script, store, bots_dir):
    bot_id = upload_script(source=b"print('hi')\n", filename="echo.py")

    record = store.load()[bot_id]
    assert record.file_path == str(bots_dir / "alice" / f"{bot_id}.py")
    assert (bots_dir / "alice" / f"{bot_id}.py").read_bytes() == b"print('hi')\n"


def test_upload_creates_stopped_record(upload_script, store):
    bot_id = upload_script(bot_name="echoBot", filename="echo.py")

    record = store.load()[bot_id]
    assert record.id == bot_id
    assert record.name == "echoBot"
    assert record.username == "alice"
    assert record.file_type == "py"
    assert record.status == BotStatus.STOPPED
    assert record.created_at is not None
    assert record.started_at is None
    assert record.cpu == 0
    assert record.memory == 0


def test_file_type_follows_extension(upload_script, store):
    js_id = upload_script(bot_name="jsBot", filename="bot.js")
    bare_id = upload_script(bot_name="bareBot", filename="bot")

    records = store.load()
    assert records[js_id].file_type == "js"
    assert records[bare_id].file_type == ""


@pytest.mark.parametrize(
    "username, bot_name, filename, stream",
    [
        (None, "echoBot", "bot.py", io.BytesIO(b"")),
        ("", "echoBot", "bot.py", io.BytesIO(b"")),
        ("alice", None, "bot.py", io.BytesIO(b"")),
        ("alice", "", "bot.py", io.BytesIO(b"")),
        ("alice", "echoBot", None, None),
        ("alice", "echoBot", "", io.BytesIO(b"")),
    ],
)
def test_missing_fields_are_rejected(
    uploader, store, bots_dir, username, bot_name, filename, stream
):
    with pytest.raises(UploadValidationError) as exc_info:
        uploader.upload_bot(username, bot_name, filename, stream)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Missing required fields"
    assert store.load() == {}
    assert not bots_dir.exists()
