from fastapi import FastAPI

from ..config import config
from .logger import Logger

log = Logger.get_logger(__name__)

# --------------------------------------------------------------------------- #


class ProductionServer:
    """Production server using Uvicorn"""

    reload = False

    def __init__(self, app_uri: str | FastAPI):
        log.info(f"Initializing {type(self).__name__} (Uvicorn)")
        self.app_uri = app_uri

    def run(self):
        """Run the server on the configured host and port"""
        import uvicorn

        log.info(
            f"Starting {type(self).__name__} on {config.server.host}:{config.server.port}"
        )
        uvicorn.run(
            self.app_uri,
            host=config.server.host,
            port=config.server.port,
            log_level=config.logger.log_level.lower(),
            log_config=config.server.log_config,
            reload=self.reload,
        )


# --------------------------------------------------------------------------- #


class DevelopmentServer(ProductionServer):
    """Development server using Uvicorn, reloading on code changes when enabled"""

    reload = config.server.reload


# --------------------------------------------------------------------------- #


class Server:
    """Server class to manage production and development servers"""

    def __init__(self, app_uri: str):
        self.app_uri = app_uri
        self.server = None

    def start(self):
        """Start the server based on the mode (production or development)"""
        if config.server.dev_mode:
            log.info("Starting server in development mode")
            self.server = DevelopmentServer(self.app_uri)
        else:
            log.info("Starting server in production mode")
            self.server = ProductionServer(self.app_uri)

        self.server.run()
