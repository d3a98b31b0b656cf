"""Page models for the page store."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from backend.config import settings


class LayoutElement(BaseModel):
    """One element of a stored layout, in wire form. Props are stored as given."""

    model_config = {"extra": "forbid"}

    id: str = Field(min_length=1, max_length=100)
    type: str = Field(min_length=1, max_length=50)
    props: dict[str, Any] = Field(default_factory=dict)


class CreatePageRequest(BaseModel):
    """What the editor sends to POST /api/pages."""

    model_config = {"extra": "forbid"}

    title: str = Field(default="Untitled", max_length=settings.PAGE_TITLE_MAX_LENGTH)
    layout: list[LayoutElement] = Field(default_factory=list)
    status: str = Field(default="draft", min_length=1, max_length=50)  # passed through, not interpreted


class CreatePageResponse(BaseModel):
    """What the create endpoint returns."""

    id: UUID


class Page(BaseModel):
    """Core page model. One stored version of a page."""

    id: UUID
    title: str
    layout: list[LayoutElement] = Field(default_factory=list)
    status: str = "draft"
    created_at: datetime


class PageSummary(BaseModel):
    """One entry of the page list."""

    id: UUID
    title: str


class PageListResponse(BaseModel):
    """What GET /api/pages returns."""

    items: list[PageSummary]


class PageResponse(BaseModel):
    """What GET /api/pages/{id} returns."""

    id: UUID
    title: str
    layout: list[LayoutElement]
    status: str
    created_at: datetime

    @classmethod
    def from_model(cls, page: Page) -> PageResponse:
        """Convert internal Page model to public API response."""
        return cls(
            id=page.id,
            title=page.title,
            layout=page.layout,
            status=page.status,
            created_at=page.created_at,
        )
