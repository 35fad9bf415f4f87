"""Environment-backed settings for the API service."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Srimitha Energy Solutions API"
    api_prefix: str = "/api"

    database_url: str = "sqlite:///./srimitha.db"
    db_echo: bool = False
    # Create missing tables on startup (dev/test). Production runs alembic.
    db_create_all: bool = True
    seed_on_startup: bool = False

    cors_origins: str = Field(default="*")
    log_level: str = "INFO"

    # Bearer token guarding the /admin review routes; unset disables them.
    admin_token: str | None = None

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
