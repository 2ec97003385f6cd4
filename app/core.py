"""Application configuration and settings management.

This module defines the application settings loaded from environment
variables and provides a helper for accessing the cached settings.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Attributes:
        DATABASE_URL: Database connection string.
        API_PREFIX: Path prefix under which all API routers are mounted.
        ALLOWED_ORIGINS: Allowed origins for CORS.
        BCRYPT_ROUNDS: Work factor used when hashing passwords.
        LOG_LEVEL: Minimum level emitted by the application logger.
        HOST: Interface the development server binds to.
        PORT: Port the development server listens on.
    """

    DATABASE_URL: str = "sqlite:///./app.db"
    API_PREFIX: str = "/api"
    ALLOWED_ORIGINS: List[str] = ["*"]
    BCRYPT_ROUNDS: int = 10
    LOG_LEVEL: str = "INFO"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    model_config = SettingsConfigDict(env_file=".env", extra="allow")

    @property
    def DATABASE_CONNECT_ARGS(self) -> dict:
        """Driver arguments for :func:`sqlalchemy.create_engine`.

        SQLite connections are shared across the worker threads that
        FastAPI runs synchronous routes in, so the same-thread check is
        disabled for it.
        """
        if self.DATABASE_URL.startswith("sqlite"):
            return {"check_same_thread": False}
        return {}


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    The settings object is cached to prevent reloading environment
    variables multiple times during application lifetime.
    """

    return Settings()
