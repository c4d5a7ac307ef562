from fastapi import Request
from fastapi.responses import JSONResponse, Response

from ..config import config
from ..libs import Logger

log = Logger.get_logger(__name__)


class CatchUnhandledErrorMiddleware:
    """Render any exception escaping a route as `{success: false, message}` with a 500

    The exception message is returned verbatim.
    """

    async def __call__(self, request: Request, call_next):
        try:
            response: Response | JSONResponse = await call_next(request)
            return response

        except Exception as e:
            if config.server.dev_mode:
                log.exception(f"Unhandled error for request {request.url.path}")
            else:
                log.critical(
                    f"Unhandled error for request {request.url.path}: {str(e)}"
                )

            return JSONResponse(
                status_code=500,
                content={"success": False, "message": str(e)},
            )
