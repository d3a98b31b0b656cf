"""Page routes — list, create, get, and the rendered page view."""

from __future__ import annotations

import hashlib
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse, Response

from backend.config import settings
from backend.models.page import (
    CreatePageRequest,
    CreatePageResponse,
    PageListResponse,
    PageResponse,
    PageSummary,
)
from backend.repos.page_repo import PageRepo
from builder.kernel.elements import layout_from_wire
from builder.kernel.renderer import render_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])
page_repo = PageRepo()


def get_page_repo() -> PageRepo:
    """Repo behind the page routes. Tests swap it through app.dependency_overrides."""
    return page_repo


_CACHE_CONTROL = "public, max-age=300"


@router.get("/api/pages", status_code=200)
async def list_pages(repo: PageRepo = Depends(get_page_repo)) -> PageListResponse:
    """List stored pages, newest first."""
    pages = await repo.list_recent(settings.PAGE_LIST_LIMIT)
    return PageListResponse(items=[PageSummary(id=p.id, title=p.title) for p in pages])


@router.post("/api/pages", status_code=201)
async def create_page(req: CreatePageRequest, repo: PageRepo = Depends(get_page_repo)) -> CreatePageResponse:
    """Store a new page. Every save creates a new page id."""
    page = await repo.create(req)
    logger.info("pages: created %s (%d elements, status=%s)", page.id, len(page.layout), page.status)
    return CreatePageResponse(id=page.id)


@router.get("/api/pages/{page_id}", status_code=200)
async def get_page(page_id: UUID, repo: PageRepo = Depends(get_page_repo)) -> PageResponse:
    """Get a single page by ID."""
    page = await repo.get(page_id)
    if not page:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found.")
    return PageResponse.from_model(page)


@router.get("/p/{page_id}", response_class=HTMLResponse)
async def view_page(page_id: UUID, repo: PageRepo = Depends(get_page_repo)) -> Response:
    """
    Serve a stored page as HTML.

    Elements that no longer decode are left out of the output.
    ETag is the MD5 of the HTML for conditional requests.
    """
    page = await repo.get(page_id)
    if page is None:
        return HTMLResponse(
            content="<html><body><h1>404: Page not found</h1></body></html>",
            status_code=404,
        )

    elements = layout_from_wire([el.model_dump() for el in page.layout])
    html_bytes = render_page(page.title, elements).encode("utf-8")
    etag = f'"{hashlib.md5(html_bytes, usedforsecurity=False).hexdigest()}"'

    return Response(
        content=html_bytes,
        media_type="text/html; charset=utf-8",
        headers={
            "Cache-Control": _CACHE_CONTROL,
            "ETag": etag,
            "X-Content-Type-Options": "nosniff",
        },
    )
