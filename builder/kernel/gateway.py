"""
Builder Kernel — Persistence Gateway

The page store as seen from the editor: list, load and save flat page
payloads (title + ordered element list + status).

Implement with HTTP for production (http_gateway.HttpGateway), or in memory
for tests.
"""

from __future__ import annotations

import copy
import uuid
from typing import Any

from builder.kernel.elements import Element, layout_from_wire, layout_to_wire
from builder.kernel.types import PageDocument, PageSummary

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GatewayError(Exception):
    """The page store could not complete a request."""

    pass


class PageNotFound(GatewayError):
    """Page does not exist in the store."""

    pass


# ---------------------------------------------------------------------------
# Gateway protocol
# ---------------------------------------------------------------------------


class PersistenceGateway:
    """
    Abstract gateway interface.

    list_pages never raises: a store that cannot be reached has no pages.
    load_page and save_page raise GatewayError (or PageNotFound).
    """

    async def list_pages(self) -> list[PageSummary]:
        raise NotImplementedError

    async def load_page(self, page_id: str) -> PageDocument:
        raise NotImplementedError

    async def save_page(self, title: str, layout: list[Element] | list[dict[str, Any]], status: str) -> str:
        """Store a new page. Returns the id the store assigned."""
        raise NotImplementedError


def page_from_wire(data: Any) -> PageDocument:
    """Decode a page body: {"title": str, "layout": [...]}. Missing parts default."""
    if not isinstance(data, dict):
        raise GatewayError("page body is not an object")
    title = data.get("title")
    return PageDocument(
        title=title if isinstance(title, str) else "",
        layout=layout_from_wire(data.get("layout")),
    )


def layout_payload(layout: list[Element] | list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Accept decoded elements or an already encoded layout."""
    if layout and isinstance(layout[0], Element):
        return layout_to_wire(layout)  # type: ignore[arg-type]
    return copy.deepcopy(layout)  # type: ignore[arg-type]


class MemoryGateway(PersistenceGateway):
    """In-memory page store for testing."""

    def __init__(self) -> None:
        self.pages: dict[str, dict[str, Any]] = {}
        self.fail_with: Exception | None = None  # set to make every call fail

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def list_pages(self) -> list[PageSummary]:
        if self.fail_with is not None:
            return []
        return [PageSummary(id=pid, title=page["title"]) for pid, page in reversed(self.pages.items())]

    async def load_page(self, page_id: str) -> PageDocument:
        self._check()
        page = self.pages.get(page_id)
        if page is None:
            raise PageNotFound(page_id)
        return page_from_wire(copy.deepcopy(page))

    async def save_page(self, title: str, layout: list[Element] | list[dict[str, Any]], status: str) -> str:
        self._check()
        page_id = str(uuid.uuid4())
        self.pages[page_id] = {"title": title, "layout": layout_payload(layout), "status": status}
        return page_id
