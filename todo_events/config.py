"""Settings and logging setup for the todo service."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["development", "production", "test"]
TodoStore = Literal["database", "memory"]


class Settings(BaseSettings):
    """Service settings, read from the environment and `.env`."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str = "sqlite:///./todos.db"

    # "memory" keeps todos in a process-local list and ignores DATABASE_URL
    TODO_STORE: TodoStore = "database"

    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "todo-events API"
    VERSION: str = "0.1.0"

    ENVIRONMENT: Environment = "development"
    LOG_LEVEL: str | None = None

    HOST: str = "0.0.0.0"  # noqa: S104
    PORT: int = 8000

    CORS_ORIGINS: list[str] = ["*"]

    @field_validator("API_V1_PREFIX", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Routers append their own leading slash."""
        return value.rstrip("/")

    @field_validator("LOG_LEVEL", mode="after")
    @classmethod
    def normalize_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def log_level(self) -> int:
        """Effective level: LOG_LEVEL if set, else DEBUG in development only."""
        if self.LOG_LEVEL is not None:
            return logging.getLevelNamesMapping()[self.LOG_LEVEL]
        return logging.DEBUG if self.ENVIRONMENT == "development" else logging.INFO


def configure_logging(environment: str = "development", level: int | None = None) -> None:
    """
    Route stdlib and structlog output through one stream.

    Production gets one JSON object per line; other environments get the
    coloured console renderer.
    """
    if level is None:
        level = logging.DEBUG if environment == "development" else logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    shared: list[Callable[..., Any]] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[*shared, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
