from .bot import (
    ApiResponse,
    BotListResponse,
    BotLogsResponse,
    BotRecord,
    BotRuntimeStatus,
    BotStatus,
    BotStatusResponse,
    BotUploadResponse,
)

# --------------------------------------------------------------------------- #

__all__ = [
    "ApiResponse",
    "BotListResponse",
    "BotLogsResponse",
    "BotRecord",
    "BotRuntimeStatus",
    "BotStatus",
    "BotStatusResponse",
    "BotUploadResponse",
]
