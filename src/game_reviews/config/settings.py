from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import to_uppercase, to_lowercase, to_async_postgres_url


class Settings(BaseSettings):
    """
    Application settings loaded from environment.
    """

    # Environment
    ENV: Literal["development", "testing", "production"] = "development"

    # Database configuration
    POSTGRES_DRIVER: str = "asyncpg"
    POSTGRES_USERNAME: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "nc_games"

    # Test database configuration
    TEST_POSTGRES_DB: str | None = None
    TESTING: bool = False

    # Hosted connection string (e.g. provided by the platform in production)
    DATABASE_URL: str | None = None

    # Connection pool. Free hosted tiers only allow a handful of concurrent
    # connections, so production defaults to 2 and never overflows.
    DB_POOL_SIZE: int | None = None

    # SQLAlchemy
    SQLALCHEMY_ECHO: bool = False

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("/var/log/game-reviews")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5
    ENABLE_SQL_LOGGING: bool = False

    # Server (python -m game_reviews)
    HOST: str = "127.0.0.1"
    PORT: int = 9090

    # --- Derived settings ---
    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        """
        Return the database URL the engine should connect to.

        - A hosted `DATABASE_URL` always wins (rewritten for the async driver).
        - With `TESTING=True` and `TEST_POSTGRES_DB` set, the test database is used so
          test runs never touch the development data.
        - Otherwise the URL is assembled from the POSTGRES_* fields.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL

        database = self.POSTGRES_DB
        if self.TESTING and self.TEST_POSTGRES_DB:
            database = self.TEST_POSTGRES_DB

        return (
            f"postgresql+{self.POSTGRES_DRIVER}://"
            f"{self.POSTGRES_USERNAME}:{self.POSTGRES_PASSWORD}@"
            f"{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/"
            f"{database}"
        )

    @property
    def EFFECTIVE_POOL_SIZE(self) -> int:
        """Explicit DB_POOL_SIZE, else 2 connections in production and 5 elsewhere."""
        if self.DB_POOL_SIZE is not None:
            return self.DB_POOL_SIZE
        return 2 if self.ENV == "production" else 5

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Normalize LOG_LEVEL to uppercase before the Literal check runs, so
        `LOG_LEVEL=debug` in the environment is accepted.
        """
        return to_uppercase(v)

    @field_validator("LOG_FORMAT", "ENV", mode="before")
    def normalize_lowercase(cls, v: str | None) -> str | None:
        return to_lowercase(v)

    @field_validator("DATABASE_URL", mode="before")
    def normalize_database_url(cls, v: str | None) -> str | None:
        return to_async_postgres_url(v)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# get_settings() takes no arguments and always returns the same settings from the environment,
# so it is cached; tests call get_settings.cache_clear() after patching the environment.
@lru_cache()
def get_settings() -> Settings:
    return Settings()
