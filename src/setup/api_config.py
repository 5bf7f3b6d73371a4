from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """HTTP adapter settings, read from ``TASKFORCE_*`` environment variables or ``.env``."""

    APP_NAME: str = "taskforce-workflow"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TASKFORCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_api_settings() -> ApiSettings:
    """Return a cached settings instance."""
    return ApiSettings()
