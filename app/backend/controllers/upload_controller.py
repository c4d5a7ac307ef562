import re
import shutil
import time
from pathlib import Path
from typing import BinaryIO

from bots.registry import BotRegistry
from shared.paths import get_owner_dir

from ..config import config
from ..libs.logger import Logger
from ..libs.record_store import BotStore
from ..models.bot import BotRecord, BotStatus
from .common import Controller, UploadValidationError

log = Logger.get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")


def make_bot_id(username: str, bot_name: str, created_ms: int | None = None) -> str:
    """Derive a bot id as `{username}_{bot_name}_{created_ms}`, whitespace runs replaced by `_`"""
    if created_ms is None:
        created_ms = int(time.time() * 1000)
    return _WHITESPACE.sub("_", f"{username}_{bot_name}_{created_ms}")


class UploadController(Controller):
    def __init__(
        self,
        store: BotStore,
        registry: BotRegistry,
        bots_dir: str | Path | None = None,
    ):
        super().__init__(store, registry)
        self.bots_dir = Path(bots_dir or config.storage.bots_dir)

    def upload_bot(
        self,
        username: str | None,
        bot_name: str | None,
        filename: str | None,
        stream: BinaryIO | None,
    ) -> str:
        """Store an uploaded script and create its record

        Args:
            username (str | None): Owner namespace
            bot_name (str | None): Display name
            filename (str | None): Original name of the uploaded file
            stream (BinaryIO | None): Content of the uploaded file

        Returns:
            str: The id of the new bot

        Raises:
            UploadValidationError: If the owner, the name or the file is missing
        """
        if not username or not bot_name or not filename or stream is None:
            log.warning(
                f"Rejected upload with missing fields (username={username!r}, bot_name={bot_name!r}, file={filename!r})"
            )
            raise UploadValidationError()

        bot_id = make_bot_id(username, bot_name)
        extension = Path(filename).suffix
        file_path = get_owner_dir(self.bots_dir, username) / f"{bot_id}{extension}"

        with file_path.open("wb") as target:
            shutil.copyfileobj(stream, target)

        records = self.store.load()
        records[bot_id] = BotRecord(
            id=bot_id,
            name=bot_name,
            username=username,
            file_path=str(file_path),
            file_type=extension[1:],
            status=BotStatus.STOPPED,
        )
        self.store.save(records)

        log.info(f"Bot uploaded: {records[bot_id]} -> {file_path}")
        return bot_id
