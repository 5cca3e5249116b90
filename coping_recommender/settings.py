"""Service configuration from environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings, read from COPING_* environment variables or .env."""

    model_config = SettingsConfigDict(env_prefix="COPING_", env_file=".env", extra="ignore")

    # None loads the packaged catalog
    catalog_path: Path | None = None

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    log_level: Literal["critical", "error", "warning", "info", "debug"] = "info"


@lru_cache
def get_settings() -> Settings:
    return Settings()
