from pathlib import Path
from subprocess import Popen

from bots import runner
from bots.factory import ScriptKind, build_command
from bots.registry import BotRegistry

from ..config import config
from ..libs.logger import Logger
from ..libs.record_store import BotStore
from ..models.bot import BotRecord, BotRuntimeStatus, BotStatus
from .common import BotAlreadyRunningError, BotNotRunningError, Controller

log = Logger.get_logger(__name__)


class BotController(Controller):
    def __init__(
        self,
        store: BotStore,
        registry: BotRegistry,
        launchers: dict[ScriptKind, str] | None = None,
    ):
        super().__init__(store, registry)
        self._launchers = launchers

    @property
    def launchers(self) -> dict[ScriptKind, str]:
        """Launcher command per script kind (the runtime configuration unless overridden)"""
        if self._launchers is not None:
            return self._launchers
        return {
            ScriptKind.PYTHON: config.runtime.python_command,
            ScriptKind.NODE: config.runtime.node_command,
        }

    def list_bots(self, username: str) -> list[BotRecord]:
        """List the bots of an owner

        Args:
            username (str): The owner namespace

        Returns:
            list[BotRecord]: The owner's records, status taken from the process registry
        """
        bots = [
            record.with_liveness(self.registry.is_running(record.id))
            for record in self.store.load().values()
            if record.username == username
        ]
        log.info(f"Retrieved {len(bots)} bots for {username}")
        return bots

    def start_bot(self, bot_id: str) -> BotRecord:
        """Spawn the script of a bot and mark its record as running

        The exit observer only prunes the registry; the record keeps saying
        `running` until an explicit stop.

        Args:
            bot_id (str): The bot to start

        Returns:
            BotRecord: The updated record

        Raises:
            BotNotFoundError: If no record exists for `bot_id`
            BotAlreadyRunningError: If the registry already holds `bot_id`
        """
        records, record = self.load_record(bot_id)

        if self.registry.is_running(bot_id):
            log.warning(f"Cannot start bot {bot_id}: already running")
            raise BotAlreadyRunningError(bot_id=bot_id)

        command = build_command(record.file_type, record.file_path, self.launchers)
        process = runner.start_bot(bot_id, command)

        registered = self.registry.register(bot_id, process)
        runner.observe_exit(bot_id, process, self._on_process_exit)
        if not registered:
            # Lost a race against a concurrent start of the same bot
            runner.stop_bot(process)
            log.warning(f"Cannot start bot {bot_id}: started concurrently")
            raise BotAlreadyRunningError(bot_id=bot_id)

        record.mark_started()
        self.store.save(records)
        log.info(f"Bot started: {record}")
        return record

    def stop_bot(self, bot_id: str) -> BotRecord:
        """Signal the process of a bot to terminate and mark its record as stopped

        Args:
            bot_id (str): The bot to stop

        Returns:
            BotRecord: The updated record

        Raises:
            BotNotFoundError: If no record exists for `bot_id`
            BotNotRunningError: If the registry does not hold `bot_id`
        """
        records, record = self.load_record(bot_id)

        process = self.registry.unregister(bot_id)
        if process is None:
            log.warning(f"Cannot stop bot {bot_id}: not running")
            raise BotNotRunningError(bot_id=bot_id)
        runner.stop_bot(process)

        record.mark_stopped()
        self.store.save(records)
        log.info(f"Bot stopped: {record}")
        return record

    def delete_bot(self, bot_id: str) -> None:
        """Terminate a bot if running, then remove its script and its record

        Args:
            bot_id (str): The bot to delete

        Raises:
            BotNotFoundError: If no record exists for `bot_id`
        """
        records, record = self.load_record(bot_id)

        process = self.registry.unregister(bot_id)
        if process is not None:
            runner.stop_bot(process)
            log.info(f"Terminated running bot {bot_id} before deletion")

        Path(record.file_path).unlink(missing_ok=True)

        del records[bot_id]
        self.store.save(records)
        log.info(f"Bot deleted: {record}")

    def get_status(self, bot_id: str) -> BotRuntimeStatus:
        """Liveness of a bot plus its cpu/memory fields

        Raises:
            BotNotFoundError: If no record exists for `bot_id`
        """
        _, record = self.load_record(bot_id)
        return BotRuntimeStatus(
            status=BotStatus.from_liveness(self.registry.is_running(bot_id)),
            cpu=record.cpu or 0,
            memory=record.memory or 0,
        )

    def get_logs(self, bot_id: str) -> str:
        """Synthesized log summary of a bot (not the captured process output)

        Raises:
            BotNotFoundError: If no record exists for `bot_id`
        """
        _, record = self.load_record(bot_id)
        return record.render_logs(self.registry.is_running(bot_id))

    def _on_process_exit(self, bot_id: str, process: Popen) -> None:
        if self.registry.unregister(bot_id, process) is not None:
            log.info(f"Bot {bot_id} is no longer running, removed from registry")
