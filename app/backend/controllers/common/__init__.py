from .controller import Controller
from .errors import (
    BotAlreadyRunningError,
    BotError,
    BotNotFoundError,
    BotNotRunningError,
    UploadValidationError,
)

# --------------------------------------------------------------------------- #

__all__ = [
    "Controller",
    "BotError",
    "BotAlreadyRunningError",
    "BotNotFoundError",
    "BotNotRunningError",
    "UploadValidationError",
]
