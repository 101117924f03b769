from pathlib import Path
from typing import Optional, Union
from dotenv import load_dotenv
import os
import pytz

def env_bool(name: str, default: bool = False) -> bool:
    return str(os.getenv(name, str(default))).strip().lower() in {"1", "true", "yes", "on", "y", "t"}

def env_int(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    try:
        return int(value)
    except ValueError:
        return default

class Settings:
    """Library settings, read from the process environment on import and on reload()."""

    @classmethod
    def reload(cls) -> None:
        # Logging
        cls.LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').strip().upper()
        cls.LOG_FILE = Path(os.getenv('LOG_FILE')) if os.getenv('LOG_FILE') else None
        cls.LOG_TO_CONSOLE = env_bool("LOG_TO_CONSOLE", True)

        # Timestamps shown in debug overlays
        cls.DISPLAY_TZ = pytz.timezone(os.getenv('DISPLAY_TZ')) if os.getenv('DISPLAY_TZ') else pytz.UTC
        cls.TIMESTAMP_FORMAT = os.getenv('TIMESTAMP_FORMAT', '%Y-%m-%d %H:%M:%S %Z')

        # Decimal places for float values in debug strings
        cls.DEBUG_PRECISION = env_int('DEBUG_PRECISION', 3)

Settings.reload()

def load_env(dotenv_path: Optional[Union[str, Path]] = None, override: bool = False) -> bool:
    """
    Load a .env file into the environment and re-read Settings.

    Importing the library never touches os.environ; host programs call
    this once at startup if they keep settings in a .env file.

    Args:
        dotenv_path: Path of the .env file (default: .env in the working directory)
        override: Let .env values replace variables already set

    Returns:
        True if at least one variable was loaded
    """
    loaded = load_dotenv(dotenv_path or Path.cwd() / '.env', override=override)
    Settings.reload()
    return loaded
