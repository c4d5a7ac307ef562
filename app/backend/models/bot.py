from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


class BotStatus(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"

    @classmethod
    def from_liveness(cls, is_running: bool) -> "BotStatus":
        return cls.RUNNING if is_running else cls.STOPPED


class BotRecord(BaseModel):
    """
    Persisted metadata of one uploaded script

    `status` is the last state written by start/stop. It is not updated when
    a process exits on its own, so liveness must be read from the process
    registry instead.

    Attributes:
        id (str): Bot id, `{username}_{name}_{created-ms}` without whitespace
        name (str): Display name
        username (str): Owner namespace (not authenticated)
        file_path (str): Location of the stored script
        file_type (str): Upload extension without the leading dot
        status (BotStatus): Advisory status
        created_at (datetime): Upload time
        started_at (Optional[datetime]): Last start time
        stopped_at (Optional[datetime]): Last explicit stop time
        cpu (int): Always 0, never measured
        memory (int): Always 0, never measured
    """

    id: str
    name: str
    username: str
    file_path: str
    file_type: str = ""
    status: BotStatus = BotStatus.STOPPED
    created_at: datetime = Field(default_factory=utc_now)
    started_at: Optional[datetime] = None
    stopped_at: Optional[datetime] = None
    cpu: int = 0
    memory: int = 0

    def __repr__(self) -> str:
        return f"<BotRecord id={self.id} username={self.username} file_type={self.file_type} status={self.status.value}>"

    def __str__(self) -> str:
        return f"BotRecord(id={self.id}, name={self.name}, username={self.username}, status={self.status.value})"

    def to_document(self) -> dict:
        """Serialize the record for the JSON record file (unset timestamps omitted)"""
        return self.model_dump(mode="json", exclude_none=True)

    def with_liveness(self, is_running: bool) -> "BotRecord":
        """Copy of the record whose status reflects the given liveness"""
        return self.model_copy(update={"status": BotStatus.from_liveness(is_running)})

    def mark_started(self) -> None:
        self.status = BotStatus.RUNNING
        self.started_at = utc_now()

    def mark_stopped(self) -> None:
        self.status = BotStatus.STOPPED
        self.stopped_at = utc_now()

    def render_logs(self, is_running: bool) -> str:
        """Build the synthesized log summary returned by the logs endpoint

        Args:
            is_running (bool): Liveness as seen by the process registry

        Returns:
            str: Name, liveness and timestamps, one per line
        """
        logs = f"Bot: {self.name}\n"
        logs += f"Status: {'Running' if is_running else 'Stopped'}\n"
        logs += f"Created: {_isoformat(self.created_at)}\n"
        if self.started_at:
            logs += f"Last started: {_isoformat(self.started_at)}\n"
        return logs


def _isoformat(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


# --------------------------------------------------------------------------- #
# Response schemas
# --------------------------------------------------------------------------- #


class BotRuntimeStatus(BaseModel):
    """Liveness plus the (unmeasured) resource fields of a bot"""

    status: BotStatus
    cpu: int = 0
    memory: int = 0


class ApiResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None


class BotListResponse(BaseModel):
    success: bool = True
    bots: list[BotRecord]


class BotUploadResponse(ApiResponse):
    bot_id: str


class BotLogsResponse(BaseModel):
    success: bool = True
    logs: str


class BotStatusResponse(BotRuntimeStatus):
    success: bool = True
