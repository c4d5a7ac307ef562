import json
import os
import tempfile
from pathlib import Path

from ..models.bot import BotRecord
from .logger import Logger

log = Logger.get_logger(__name__)


class BotStore:
    """Whole-document JSON store of bot records

    Every `load` reads the full file and every `save` rewrites it. There is no
    locking: two read-modify-write sequences running at the same time lose
    the earlier `save`.
    """

    def __init__(self, records_file: str | Path):
        self.records_file = Path(records_file)

    def initialize(self) -> None:
        """Create the record file as an empty document if it does not exist"""
        if self.records_file.exists():
            return
        log.info(f"Initializing bot record file at {self.records_file}")
        self.records_file.parent.mkdir(parents=True, exist_ok=True)
        self.records_file.write_text(json.dumps({}), encoding="utf-8")

    def load(self) -> dict[str, BotRecord]:
        """Load every record, keyed by bot id

        Returns:
            dict[str, BotRecord]: The persisted records

        Raises:
            json.JSONDecodeError | pydantic.ValidationError: If the file is corrupt
        """
        self.initialize()
        data = json.loads(self.records_file.read_text(encoding="utf-8"))
        return {
            bot_id: BotRecord.model_validate(document)
            for bot_id, document in data.items()
        }

    def save(self, records: dict[str, BotRecord]) -> None:
        """Overwrite the persisted set with `records`

        The document is written to a sibling temp file and moved over the
        record file, so readers see either the old or the new document.

        Args:
            records (dict[str, BotRecord]): The complete set of records
        """
        document = {bot_id: record.to_document() for bot_id, record in records.items()}
        self.records_file.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.records_file.parent, prefix=".bots-", suffix=".json"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                json.dump(document, tmp_file, indent=2)
            os.replace(tmp_path, self.records_file)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        log.debug(f"Saved {len(document)} bot records to {self.records_file}")
