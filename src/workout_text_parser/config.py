"""Configuration settings for the workout text parser service."""
import logging
import os
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]

DEFAULT_PARSE_MAX_WORKERS = 4
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:3001"


def _int_from_env(name: str, default: int, minimum: int = 1) -> int:
    """Read a positive int from the environment, falling back to the default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"
    LOG_LEVEL: str = "INFO"

    # Batch parsing
    PARSE_MAX_WORKERS: int = DEFAULT_PARSE_MAX_WORKERS

    # HTTP
    CORS_ORIGINS: List[str] = []

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_LEVEL = level if isinstance(logging.getLevelName(level), int) else "INFO"

        # Batch parsing
        self.PARSE_MAX_WORKERS = _int_from_env("PARSE_MAX_WORKERS", DEFAULT_PARSE_MAX_WORKERS)

        # HTTP
        origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        self.CORS_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]


settings = Settings()
