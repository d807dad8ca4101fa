"""
Centralized application configuration

Author: TM3
Date: 2025-10-17
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, loaded from environment variables or .env"""

    # Database
    DATABASE_URL: str = ""
    DB_CONNECT_TIMEOUT: int = 10
    DB_MAX_RETRIES: int = 3
    DB_RETRY_DELAY: float = 1.0

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
