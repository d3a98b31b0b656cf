"""
Builder configuration — all environment variables in one place.

Read from environment at import time.
"""

from __future__ import annotations

import os


class Settings:
    """Editor settings from environment variables."""

    # Page store
    API_URL: str = os.environ.get("BUILDER_API_URL", "http://localhost:8000").rstrip("/")
    HTTP_TIMEOUT: float = float(os.environ.get("BUILDER_HTTP_TIMEOUT", "30"))

    # Documents
    DEFAULT_TITLE: str = "My New Page"
    UNTITLED: str = "Untitled"
    DEFAULT_STATUS: str = "draft"


# Singleton instance
settings = Settings()
