"""
Builder Kernel — Editor Session

Sits between the pure editing components (document, drag engine, inspector,
renderer) and the outside world (the page store). One session per editor;
nothing here is a module-level singleton, so sessions can coexist.

Operations: add_element, duplicate, delete, refresh_pages, save, load

This is where IO happens. Every gateway failure ends here as a status
message; none propagate to the caller.

Save/load are coroutines. The editor keeps accepting edits while one is in
flight: a save sends the document as it was when save() was called, and a
load replaces the document when its response arrives, whatever was edited in
between. A second save while one is in flight is refused.
"""

from __future__ import annotations

import logging

from builder.config import settings
from builder.kernel.document import DocumentState
from builder.kernel.drag import DragReorderEngine
from builder.kernel.elements import UnknownElementKind, create_default
from builder.kernel.gateway import GatewayError, PersistenceGateway
from builder.kernel.inspector import InspectorBinding
from builder.kernel.renderer import render_canvas
from builder.kernel.types import IGNORED_GESTURE, EditResult, PageSummary, rejected

logger = logging.getLogger(__name__)


class EditorSession:
    """
    Owns one document and the components bound to it.

    `message` is the status line shown next to the Save button.
    """

    def __init__(self, gateway: PersistenceGateway, *, title: str | None = None) -> None:
        self.gateway = gateway
        self.document = DocumentState(title=title if title is not None else settings.DEFAULT_TITLE)
        self.drag = DragReorderEngine(self.document)
        self.inspector = InspectorBinding(self.document)
        self.pages: list[PageSummary] = []
        self.message = ""
        self.saving = False

    @property
    def title(self) -> str:
        return self.document.title

    @title.setter
    def title(self, value: str) -> None:
        self.document.title = value

    # -- editing -----------------------------------------------------------

    def add_element(self, kind: str, index: int | None = None) -> EditResult:
        """Palette click: insert a default element (appended by default) and select it."""
        try:
            element = create_default(kind)
        except UnknownElementKind:
            logger.debug("session: ignoring add of unknown kind %r", kind)
            return rejected(IGNORED_GESTURE)
        at = len(self.document) if index is None else index
        return self.document.insert(element, at, select=True)

    def duplicate(self, element_id: str) -> EditResult:
        return self.document.duplicate(element_id)

    def delete(self, element_id: str) -> EditResult:
        return self.document.remove(element_id)

    def render(self) -> str:
        return render_canvas(self.document, self.document.selected_id)

    # -- persistence -------------------------------------------------------

    async def refresh_pages(self) -> list[PageSummary]:
        self.pages = await self.gateway.list_pages()
        return self.pages

    async def save(self, status: str | None = None) -> str | None:
        """
        Store the document as a new page. Returns its id, or None when the
        save failed or another save is still in flight.
        """
        if self.saving:
            logger.info("session: save already in flight, ignoring")
            return None

        payload = self.document.to_payload(settings.DEFAULT_STATUS if status is None else status)
        self.saving = True
        self.message = ""
        try:
            page_id = await self.gateway.save_page(payload["title"], payload["layout"], payload["status"])
        except GatewayError as e:
            logger.warning("session: save failed: %s", e)
            self.message = f"Error: {e}"
            return None
        finally:
            self.saving = False

        logger.info("session: saved page %s (%d elements)", page_id, len(payload["layout"]))
        self.message = f"Saved ✔ ID: {page_id}"
        await self.refresh_pages()
        return page_id

    async def load(self, page_id: str) -> bool:
        """Replace the document with a stored page. On failure the document is untouched."""
        try:
            page = await self.gateway.load_page(page_id)
        except GatewayError as e:
            logger.warning("session: load of %s failed: %s", page_id, e)
            self.message = "Failed to load page"
            return False

        try:
            self.document.replace_all(page.title or settings.UNTITLED, page.layout)
        except ValueError as e:
            logger.warning("session: page %s is not a valid document: %s", page_id, e)
            self.message = "Failed to load page"
            return False

        self.drag.cancel()
        logger.info("session: loaded page %s (%d elements)", page_id, len(page.layout))
        self.message = "Loaded ✔"
        return True
