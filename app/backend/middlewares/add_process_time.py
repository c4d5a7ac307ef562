import time

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from ..libs import Logger

log = Logger.get_logger(__name__)


class AddProcessTimeMiddleware:
    """Expose the handling time of each request in the `X-Process-Time` header"""

    async def __call__(self, request: Request, call_next):
        start_time = time.perf_counter()
        response: Response | JSONResponse = await call_next(request)
        process_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.6f}"
        if "healthcheck" not in request.url.path:
            log.debug(
                f"{request.method} {request.url.path} -> {response.status_code} in {process_time * 1000:.1f} ms"
            )
        return response
