"""Application configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.
"""

from typing import Optional
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Environment Variables:
        FTP_DEFAULT_TIMEOUT: Connect timeout override in seconds (unset = transport default)
        FTP_CONNECT_TIMEOUT: Connect timeout used when no override is given
        FTP_DATA_TIMEOUT: Timeout for data connections in seconds
        FTP_PASSIVE_MODE: Enter passive mode right after login (default False)
        FTP_USER_DIR_IS_ROOT: Treat the login directory as root (default True)
        FTP_CONTROL_ENCODING: Encoding of the control connection (default utf-8)
        LOG_LEVEL: Logging level (default INFO)
        LOG_JSON: Emit JSON log lines (default True)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # FTP
    FTP_DEFAULT_TIMEOUT: Optional[float] = None
    FTP_CONNECT_TIMEOUT: Optional[float] = 30.0
    FTP_DATA_TIMEOUT: Optional[float] = None
    FTP_PASSIVE_MODE: bool = False
    FTP_USER_DIR_IS_ROOT: bool = True
    FTP_CONTROL_ENCODING: str = "utf-8"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache for singleton behavior.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
