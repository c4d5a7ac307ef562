class BotError(Exception):
    """Base class of the errors reported to API callers

    Attributes:
        status_code (int): HTTP status the error maps to
        message (str): Message returned verbatim to the caller
    """

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None, *, bot_id: str | None = None):
        self.message = message or self.default_message
        self.bot_id = bot_id
        super().__init__(self.message)


class UploadValidationError(BotError):
    status_code = 400
    default_message = "Missing required fields"


class BotNotFoundError(BotError):
    status_code = 404
    default_message = "Bot not found"


class BotAlreadyRunningError(BotError):
    status_code = 400
    default_message = "Bot already running"


class BotNotRunningError(BotError):
    status_code = 400
    default_message = "Bot not running"
