from .fastapi_setup import FastAPISetup
from .logger import Logger
from .server import Server

# --------------------------------------------------------------------------- #

__all__ = ["FastAPISetup", "Logger", "Server"]
