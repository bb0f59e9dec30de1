"""
Table Order Service — Configuration
"""
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ── Service ──────────────────────────────────────────────
    SERVICE_NAME: str = "table-order"
    SERVICE_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "127.0.0.1"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # ── PostgreSQL ────────────────────────────────────────────
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "sukab_restaurant"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    DATABASE_URL: str | None = None   # full override, e.g. sqlite+aiosqlite:///./dev.db

    POSTGRES_POOL_SIZE: int = 10
    POSTGRES_POOL_TIMEOUT: float = 30.0   # seconds to wait for a free connection
    DB_BOOTSTRAP: bool = True             # create tables + seed menus on startup

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    # ── Kitchen Timing ──────────────────────────────────────
    COOK_TIME_MIN_MINUTES: int = 5
    COOK_TIME_MAX_MINUTES: int = 10

    # ── Observability ─────────────────────────────────────────
    METRICS_ENABLED: bool = True
    HEALTH_CHECK_TIMEOUT: float = 5.0

    @model_validator(mode="after")
    def _check_cook_time_bounds(self) -> "Settings":
        if self.COOK_TIME_MIN_MINUTES < 1:
            raise ValueError("COOK_TIME_MIN_MINUTES must be at least 1")
        if self.COOK_TIME_MIN_MINUTES > self.COOK_TIME_MAX_MINUTES:
            raise ValueError(
                "COOK_TIME_MIN_MINUTES must not exceed COOK_TIME_MAX_MINUTES "
                f"({self.COOK_TIME_MIN_MINUTES} > {self.COOK_TIME_MAX_MINUTES})"
            )
        return self


@lru_cache()
def get_settings() -> Settings:
    return Settings()
