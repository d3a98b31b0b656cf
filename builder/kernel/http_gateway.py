"""HTTP page store gateway (httpx)."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from builder.config import settings
from builder.kernel.elements import Element
from builder.kernel.gateway import (
    GatewayError,
    PageNotFound,
    PersistenceGateway,
    layout_payload,
    page_from_wire,
)
from builder.kernel.types import PageDocument, PageSummary

logger = logging.getLogger(__name__)


class HttpGateway(PersistenceGateway):
    """
    Talks to the page API:

      GET  /api/pages        → {"items": [{"id", "title"}, ...]}
      GET  /api/pages/{id}   → {"title", "layout", ...}
      POST /api/pages        → {"id"}
    """

    def __init__(
        self,
        api_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self.api_url = (api_url or settings.API_URL).rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout or settings.HTTP_TIMEOUT)

    def _headers(self) -> dict:
        return {"Content-Type": "application/json", "Accept": "application/json"}

    async def list_pages(self) -> list[PageSummary]:
        """Page picker entries. Empty on any failure."""
        try:
            res = await self.client.get(f"{self.api_url}/api/pages", headers=self._headers())
            res.raise_for_status()
            data = res.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("http_gateway: list_pages failed: %s", e)
            return []

        items = data.get("items") if isinstance(data, dict) else None
        pages: list[PageSummary] = []
        for item in items or []:
            if isinstance(item, dict) and "id" in item:
                pages.append(PageSummary(id=str(item["id"]), title=str(item.get("title") or "")))
        return pages

    async def load_page(self, page_id: str) -> PageDocument:
        try:
            res = await self.client.get(f"{self.api_url}/api/pages/{page_id}", headers=self._headers())
        except httpx.HTTPError as e:
            raise GatewayError(f"Failed to load page: {e}") from e

        if res.status_code == 404:
            raise PageNotFound(page_id)
        try:
            res.raise_for_status()
            data = res.json()
        except (httpx.HTTPError, ValueError) as e:
            raise GatewayError(f"Failed to load page: {e}") from e
        return page_from_wire(data)

    async def save_page(self, title: str, layout: list[Element] | list[dict[str, Any]], status: str) -> str:
        body = {"title": title, "layout": layout_payload(layout), "status": status}
        try:
            res = await self.client.post(f"{self.api_url}/api/pages", json=body, headers=self._headers())
            res.raise_for_status()
            data = res.json()
        except (httpx.HTTPError, ValueError) as e:
            raise GatewayError("Failed to save") from e

        page_id = data.get("id") if isinstance(data, dict) else None
        if page_id is None:
            raise GatewayError("Failed to save: no id in response")
        return str(page_id)

    async def aclose(self) -> None:
        """Close the client if this gateway created it."""
        if self._owns_client:
            await self.client.aclose()
