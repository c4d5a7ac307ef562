from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeConfig(BaseSettings):
    """Bot runtime configuration settings"""

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="RUNTIME_")

    python_command: str = "python3"
    """Launcher used for `.py` scripts (may include extra flags, e.g. `python3 -u`)"""
    node_command: str = "node"
    """Launcher used for every other script"""
