from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from nodeloom.domain.errors import ConfigurationError

# Get the repository root directory (parent of the package directory)
REPO_ROOT = Path(__file__).parent.parent.absolute()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # API settings
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8080
    API_PREFIX: str = "/api/v1"

    # Version and run mode ("debug", "release" or "test")
    VERSION: str = "0.1.0"
    MODE: str = "debug"
    LOG_LEVEL: str = "INFO"

    # Remote store (PostgREST-style REST endpoint)
    REMOTE_STORE_URL: str = ""
    REMOTE_STORE_KEY: str = ""
    REMOTE_STORE_TIMEOUT: float = 10.0

    # Bearer tokens
    TOKEN_SECRET: str = ""
    TOKEN_ALGORITHM: str = "HS256"
    TOKEN_TTL_MINUTES: int = 60

    @property
    def debug(self) -> bool:
        return self.MODE == "debug"

    def require_remote_store(self) -> None:
        """Raise ConfigurationError unless the remote store and token secret are configured."""
        missing = [
            name
            for name in ("REMOTE_STORE_URL", "REMOTE_STORE_KEY", "TOKEN_SECRET")
            if not getattr(self, name).strip()
        ]
        if missing:
            raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")
        if not self.REMOTE_STORE_URL.startswith(("http://", "https://")):
            raise ConfigurationError(f"REMOTE_STORE_URL must be an http(s) URL: {self.REMOTE_STORE_URL}")
        if self.MODE not in ("debug", "release", "test"):
            raise ConfigurationError(f"Unknown MODE: {self.MODE}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Set the ``nodeloom`` logger level and attach a stream handler once.

    Runs inside whichever process builds the app, so a reload worker spawned
    by uvicorn gets the same setup as the parent.
    """
    logger = logging.getLogger("nodeloom")
    logger.setLevel(logging.DEBUG if settings.debug else settings.LOG_LEVEL.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
