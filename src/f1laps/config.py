"""
Runtime configuration using Pydantic Settings.
Every field can be overridden with an ``F1LAPS_``-prefixed environment variable.
"""
from pathlib import Path

from pydantic_settings import BaseSettings

from f1laps._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from f1laps.drivers import DriverDirectory


class Settings(BaseSettings):
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_dir: Path = Path("logs")
    roster_file: Path | None = None  # JSON object of driver number -> name

    model_config = {"env_prefix": "F1LAPS_"}


def load_directory(settings: Settings) -> DriverDirectory:
    """Return the configured driver directory, or the built-in roster."""
    if settings.roster_file is None:
        return DriverDirectory()
    return DriverDirectory.from_file(settings.roster_file)
