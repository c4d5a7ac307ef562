import platform
from pathlib import Path
from os import getenv

APP_NAME = "BotHost"


def get_app_data_dir() -> Path:
    """Get the application data directory based on the operating system

    Note: If BOTHOST_DEVMODE=true is set in the environment variables,
    the function will return a temporary directory for development purposes.

    Returns:
        Path: The path to the application data directory
    """
    if getenv("BOTHOST_DEVMODE", "false").lower() == "true":
        return Path("/tmp") / APP_NAME

    system = platform.system()

    if system == "Windows":
        base = Path.home() / "AppData" / "Roaming"
    elif system == "Darwin":  # macOS
        base = Path.home() / "Library" / "Application Support"
    else:  # Linux
        base = Path.home() / ".local" / "share"

    return base / APP_NAME


def get_owner_dir(bots_dir: Path, username: str) -> Path:
    """Get (and create) the directory holding the scripts of one owner

    Args:
        bots_dir (Path): Root directory of uploaded scripts
        username (str): Owner namespace

    Returns:
        Path: The per-owner directory
    """
    path = Path(bots_dir) / username
    path.mkdir(parents=True, exist_ok=True)
    return path
