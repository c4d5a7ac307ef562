from bots.registry import BotRegistry

from ...libs.record_store import BotStore
from ...models.bot import BotRecord
from .errors import BotNotFoundError


class Controller:
    def __init__(self, store: BotStore, registry: BotRegistry):
        self.store = store
        self.registry = registry

    def load_record(self, bot_id: str) -> tuple[dict[str, BotRecord], BotRecord]:
        """
        Load every record and pick the one of `bot_id`

        Args:
            bot_id (str): The bot to look up

        Returns:
            tuple[dict[str, BotRecord], BotRecord]: All records (to be saved back) and the requested one

        Raises:
            BotNotFoundError: If no record exists for `bot_id`
        """
        records = self.store.load()
        record = records.get(bot_id)
        if record is None:
            raise BotNotFoundError(bot_id=bot_id)
        return records, record
