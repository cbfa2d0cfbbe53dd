"""Application settings.

Values are read from ``USERS_SERVICE_*`` environment variables and an
optional ``.env`` file in the working directory.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="USERS_SERVICE_",
        env_file=".env",
        extra="ignore",
    )

    # Accepted bearer token for every /users request
    api_token: str = "demo-token"

    # OpenAPI docs are only served in development
    environment: Literal["development", "production"] = "production"

    https_redirect: bool = False
    log_level: str = "INFO"

    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
