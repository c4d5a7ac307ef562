from .bot_controller import BotController
from .upload_controller import UploadController

# --------------------------------------------------------------------------- #

__all__ = ["BotController", "UploadController"]
