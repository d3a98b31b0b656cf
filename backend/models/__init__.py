"""
Pydantic models for the page store.

All data shapes defined here. No imports from repos or routes.
"""

from backend.models.page import (
    CreatePageRequest,
    CreatePageResponse,
    LayoutElement,
    Page,
    PageListResponse,
    PageResponse,
    PageSummary,
)

__all__ = [
    "LayoutElement",
    "CreatePageRequest",
    "CreatePageResponse",
    "Page",
    "PageSummary",
    "PageListResponse",
    "PageResponse",
]
