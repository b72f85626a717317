"""
Core configuration management using Pydantic Settings.

Loads configuration from environment variables and .env files.
Provides type-safe access to all application settings.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # MongoDB connection
    mongo_host: str = Field(default="localhost")
    mongo_port: int = Field(default=27017, gt=0)
    mongo_db_name: str = Field(default="onlinelibrary")
    mongo_username: Optional[str] = Field(default=None)
    mongo_password: Optional[str] = Field(default=None)
    mongo_auth_source: str = Field(default="admin")
    mongo_timeout_ms: int = Field(default=5000, gt=0)

    # Server settings
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Frontend URL for CORS
    frontend_url: str = Field(default="http://localhost:3000")

    # Paging
    page_size: int = Field(default=10, gt=0)

    # Logging
    log_level: str = Field(default="INFO")
    log_to_file: bool = Field(default=True)
    log_json: bool = Field(default=False)
    log_dir: str = Field(default="logs")


@lru_cache()
def get_settings():
    # type: () -> Settings
    """
    Get cached settings instance.

    Returns:
        Settings instance loaded from environment
    """
    return Settings()


def get_page_size():
    # type: () -> int
    """Get the default page size for paginated listings."""
    return get_settings().page_size
