"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All connection strings come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - A local .env file is read only when ENV is not "prod"

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - DB_NAME overrides the database component of DB_URI: the store URI and the
      database name are configured separately by deployments
    - Defaults for every non-secret setting: runs out-of-the-box on local SQLite
"""

import os
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

from availability.models.instance_record import DEFAULT_COLLECTION

PRODUCTION_ENV = "prod"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    env: str = "dev"

    # Store
    db_uri: str = "sqlite+aiosqlite:///./availability.db"
    db_name: str | None = None
    db_collection: str = DEFAULT_COLLECTION

    @field_validator("db_uri", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    store_timeout_seconds: float = 10.0

    # HTTP
    port: int = 8080
    cors_origin_regex: str = r"https?://.*"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_production(self) -> bool:
        return self.env.lower() == PRODUCTION_ENV

    @property
    def database_url(self) -> str:
        """DB_URI with DB_NAME applied as the database component."""
        if not self.db_name:
            return self.db_uri
        url = make_url(self.db_uri).set(database=self.db_name)
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    if os.environ.get("ENV", "").lower() == PRODUCTION_ENV:
        return Settings(_env_file=None)
    return Settings()
