"""Runtime configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from ``BOARD_*`` environment variables."""

    # Backend under test
    host: str = "http://127.0.0.1:37001"
    api_token: str = ""
    timeout_seconds: float = 30.0

    # Contract behaviour
    strict_not_found: bool = False
    authorize: bool = True

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "BOARD_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
