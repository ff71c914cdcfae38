"""
API configuration settings.
"""

from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """API settings."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = True

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Game data
    DATA_DIR: Optional[Path] = None  # Directory with champions/ and items/; packaged data when unset
    RULES_FILE: Optional[Path] = None  # JSON rule tables for another patch

    # Builds
    MAX_ITEMS: int = 6

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
