"""
Page store configuration — all environment variables in one place.

Read from environment at runtime.
"""

from __future__ import annotations

import os


class Settings:
    """Service settings from environment variables."""

    # Database
    DATABASE_URL: str = os.environ.get("DATABASE_URL", "")
    DB_POOL_MIN_SIZE: int = int(os.environ.get("DB_POOL_MIN_SIZE", "1"))
    DB_POOL_MAX_SIZE: int = int(os.environ.get("DB_POOL_MAX_SIZE", "10"))

    # Application
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")

    # The editor frontend runs on its own dev server and calls the API cross-origin.
    CORS_ORIGINS: list[str] = [
        origin.strip()
        for origin in os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(",")
        if origin.strip()
    ]

    # Pages
    PAGE_LIST_LIMIT: int = int(os.environ.get("PAGE_LIST_LIMIT", "100"))
    PAGE_TITLE_MAX_LENGTH: int = 200


# Singleton instance
settings = Settings()

if settings.PAGE_LIST_LIMIT < 1:
    raise RuntimeError("PAGE_LIST_LIMIT must be a positive integer")
