"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Filesystem layout
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
STATIC_FILES_DIR = PROJECT_ROOT / "StaticFiles"

# Upload folders, relative to the static files directory
IMAGE_UPLOADS_FOLDER = "ImageUploads"
VIDEO_UPLOADS_FOLDER = "UploadedVideos"

# Upload limits
MAX_FILE_UPLOAD_BYTES = 1_000_000_000
MAX_VIDEO_STREAM_BYTES = 500 * 1024 * 1024
UPLOAD_CHUNK_SIZE = 64 * 1024


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./bizhub.db"

    # API
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "bizhub API"
    VERSION: str = "0.1.0"

    # Base address used to build public links to uploaded media
    API_BASE_ADDRESS: str = "http://localhost:8000"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Media storage
    STATIC_FILES_DIR: Path = STATIC_FILES_DIR
    MAX_FILE_UPLOAD_BYTES: int = MAX_FILE_UPLOAD_BYTES
    MAX_VIDEO_STREAM_BYTES: int = MAX_VIDEO_STREAM_BYTES
    UPLOAD_CHUNK_SIZE: int = UPLOAD_CHUNK_SIZE

    # Bulk uploads
    UPLOAD_CONCURRENCY: int = 4

    @field_validator(
        "MAX_FILE_UPLOAD_BYTES",
        "MAX_VIDEO_STREAM_BYTES",
        "UPLOAD_CHUNK_SIZE",
        "UPLOAD_CONCURRENCY",
        mode="after",
    )
    @classmethod
    def require_positive(cls, value: int) -> int:
        """Reject zero or negative limits."""
        if value < 1:
            msg = "Value must be a positive integer"
            raise ValueError(msg)
        return value

    @field_validator("API_BASE_ADDRESS", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Strip trailing slashes from the base address."""
        return value.rstrip("/")


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
