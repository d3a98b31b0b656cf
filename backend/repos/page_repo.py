"""Repository for page operations."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from uuid import UUID, uuid4

import asyncpg

from backend.db import page_conn
from backend.models.page import CreatePageRequest, Page


def _row_to_page(row: asyncpg.Record) -> Page:
    """Convert a database row to a Page model."""
    return Page(
        id=row["id"],
        title=row["title"],
        layout=row["layout"],
        status=row["status"],
        created_at=row["created_at"],
    )


class PageRepo:
    """
    All page database operations.

    Every create inserts a new row under a new id; pages are never updated
    in place.
    """

    async def create(self, req: CreatePageRequest) -> Page:
        """
        Store a new page.

        Args:
            req: CreatePageRequest with title, layout and status

        Returns:
            Newly created Page
        """
        async with page_conn() as conn:
            row = await conn.fetchrow(
                """
                INSERT INTO pages (id, title, layout, status, created_at)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING *
                """,
                uuid4(),
                req.title,
                [el.model_dump() for el in req.layout],
                req.status,
                datetime.now(UTC),
            )
            return _row_to_page(row)

    async def get(self, page_id: UUID) -> Page | None:
        """
        Get a page by ID.

        Args:
            page_id: Page UUID

        Returns:
            Page if found, None otherwise
        """
        async with page_conn() as conn:
            row = await conn.fetchrow("SELECT * FROM pages WHERE id = $1", page_id)
            return _row_to_page(row) if row else None

    async def list_recent(self, limit: int) -> list[Page]:
        """
        List stored pages.

        Args:
            limit: Maximum number of pages

        Returns:
            List of Page objects ordered by created_at DESC
        """
        async with page_conn() as conn:
            rows = await conn.fetch("SELECT * FROM pages ORDER BY created_at DESC LIMIT $1", limit)
            return [_row_to_page(row) for row in rows]


class MemoryPageRepo(PageRepo):
    """
    In-memory PageRepo for tests. Pages live in process memory and are gone
    on restart; never serve the app from it.
    """

    def __init__(self) -> None:
        self._pages: dict[UUID, Page] = {}
        self._lock = asyncio.Lock()

    async def create(self, req: CreatePageRequest) -> Page:
        page = Page(
            id=uuid4(),
            title=req.title,
            layout=[el.model_copy(deep=True) for el in req.layout],
            status=req.status,
            created_at=datetime.now(UTC),
        )
        async with self._lock:
            self._pages[page.id] = page
        return page

    async def get(self, page_id: UUID) -> Page | None:
        return self._pages.get(page_id)

    async def list_recent(self, limit: int) -> list[Page]:
        async with self._lock:
            pages = list(reversed(self._pages.values()))
        return pages[:limit]
