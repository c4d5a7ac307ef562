from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendConfig(BaseSettings):
    """Backend configuration settings shared by the server and the logger"""

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="BACKEND_")

    server_dev_mode: bool = False
    """Enable development mode for the server (verbose 500 logging, reload allowed)"""
    server_reload: bool = False
    """Enable server auto-reload on code changes (for development)"""
    server_log_level: str = "INFO"
    """Logging level for the server and the bot output forwarding"""


# --------------------------------------------------------------------------- #

backend_config = BackendConfig()
"""Backend configuration instance"""
