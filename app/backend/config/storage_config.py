from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from shared.paths import get_app_data_dir


class StorageConfig(BaseSettings):
    """Storage configuration settings"""

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="STORAGE_")

    bots_dir: Path = get_app_data_dir() / "user_bots"
    """Directory tree of uploaded scripts, one subdirectory per owner"""
    records_file: Path = get_app_data_dir() / "bots.json"
    """JSON document holding every bot record, keyed by bot id"""
