from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..config import config
from .logger import Logger

log = Logger.get_logger(__name__)


class FastAPISetup:
    @classmethod
    def setup_openapi(cls, app: FastAPI) -> None:
        """Setup OpenAPI configuration for the FastAPI app

        Args:
            app (FastAPI): The FastAPI application instance

        Returns:
            None
        """
        log.info("Setting up OpenAPI configuration")

        def _custom_openapi():
            """Generate or return custom OpenAPI schema based on configuration"""
            from fastapi.openapi.utils import get_openapi

            if not app.openapi_schema:
                app.openapi_schema = get_openapi(
                    title=config.openapi.title,
                    version=config.openapi.version,
                    description=config.openapi.description,
                    routes=app.routes,
                )
            return app.openapi_schema

        app.openapi = _custom_openapi

    @classmethod
    def setup_middlewares(cls, app: FastAPI) -> None:
        """Setup middlewares for the FastAPI app

        The CORS middleware is added last so it wraps the 500 responses
        produced by the unhandled error middleware.

        Args:
            app (FastAPI): The FastAPI application instance

        Returns:
            None
        """
        from starlette.middleware.base import BaseHTTPMiddleware
        from starlette.middleware.cors import CORSMiddleware

        from ..middlewares import (
            AddProcessTimeMiddleware,
            CatchUnhandledErrorMiddleware,
        )

        log.info("Setting up middlewares")

        app.add_middleware(BaseHTTPMiddleware, dispatch=AddProcessTimeMiddleware())
        app.add_middleware(BaseHTTPMiddleware, dispatch=CatchUnhandledErrorMiddleware())
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @classmethod
    def setup_exception_handlers(cls, app: FastAPI) -> None:
        """Render bot errors as `{success: false, message}` with their status code

        Request validation failures (a form field of the wrong kind, such as
        a text value where the upload expects a file) are reported like a
        missing field.

        Args:
            app (FastAPI): The FastAPI application instance

        Returns:
            None
        """
        from fastapi.exceptions import RequestValidationError

        from ..controllers.common import BotError, UploadValidationError

        log.info("Setting up exception handlers")

        async def _bot_error_handler(request: Request, exc: BotError):
            log.warning(
                f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.message}"
            )
            return JSONResponse(
                status_code=exc.status_code,
                content={"success": False, "message": exc.message},
            )

        async def _validation_error_handler(
            request: Request, exc: RequestValidationError
        ):
            log.debug(f"Rejected request fields: {exc.errors()}")
            return await _bot_error_handler(request, UploadValidationError())

        app.add_exception_handler(BotError, _bot_error_handler)
        app.add_exception_handler(RequestValidationError, _validation_error_handler)

    @classmethod
    def setup_routes(cls, app: FastAPI) -> None:
        """Setup API routes for the FastAPI app

        Args:
            app (FastAPI): The FastAPI application instance

        Returns:
            None
        """
        from ..routers.bot_routes import bot_operations_router, bots_router
        from ..routers.root import core_router, root_router

        log.info("Setting up API routes")

        app.include_router(root_router)
        app.include_router(core_router)
        app.include_router(bots_router)
        app.include_router(bot_operations_router)

    @classmethod
    @asynccontextmanager
    async def lifespan(cls, app: FastAPI):
        from bots.registry import BotRegistry

        from .record_store import BotStore

        try:
            log.info("FastAPI application startup.")
            Logger.setup_loggers()

            store = BotStore(config.storage.records_file)
            store.initialize()
            bots_dir = Path(config.storage.bots_dir)
            bots_dir.mkdir(parents=True, exist_ok=True)

            app.state.store = store
            app.state.bots_dir = bots_dir
            app.state.registry = BotRegistry()
            log.info(
                f"Serving bot records from {store.records_file}, scripts under {bots_dir}"
            )
            yield
        except Exception as e:
            log.error(f"Exception during lifespan: {e}")
            raise
        finally:
            log.info("FastAPI application shutdown.")
            registry = getattr(app.state, "registry", None)
            if registry is not None:
                stopped = registry.stop_all()
                if stopped:
                    log.info(f"Terminated {len(stopped)} running bots: {stopped}")
