from .global_config import config

# --------------------------------------------------------------------------- #

__all__ = ["config"]
