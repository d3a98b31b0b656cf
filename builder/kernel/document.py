"""
Builder Kernel — Document State

Owns the ordered element list, the page title and the current selection.
The only place the element list is mutated.

Every operation is synchronous and total: it returns an EditResult instead of
raising. Stale ids (an element removed between gesture start and drop, a
double-clicked delete) are rejected with NOT_FOUND and leave the document as
it was.

Invariants held before and after every operation:
- no two elements share an id
- the selection is empty or names an element in the list
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from builder.kernel.elements import (
    Element,
    ElementProps,
    InvalidProperties,
    clone_as_new,
    layout_to_wire,
    validate_properties,
)
from builder.kernel.types import (
    DUPLICATE_ID,
    INVALID_PROPERTIES,
    NOT_FOUND,
    EditResult,
    applied,
    rejected,
)


def _clamp(index: int, upper: int) -> int:
    return max(0, min(index, upper))


class DocumentState:
    """One editing session's document. Construct one per session."""

    def __init__(self, title: str = "", elements: list[Element] | None = None) -> None:
        self.title = title
        self._elements: list[Element] = []
        self._selected_id: str | None = None
        if elements:
            self.replace_all(title, elements)

    # -- reading -----------------------------------------------------------

    @property
    def elements(self) -> tuple[Element, ...]:
        return tuple(self._elements)

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    @property
    def selected(self) -> Element | None:
        if self._selected_id is None:
            return None
        return self.get(self._selected_id)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(tuple(self._elements))

    def index_of(self, element_id: str) -> int | None:
        for i, el in enumerate(self._elements):
            if el.id == element_id:
                return i
        return None

    def get(self, element_id: str) -> Element | None:
        idx = self.index_of(element_id)
        return None if idx is None else self._elements[idx]

    # -- mutation ----------------------------------------------------------

    def insert(self, element: Element, index: int, *, select: bool = False) -> EditResult:
        """
        Insert `element` at `index`, clamped to [0, len]. Elements at and after
        the index shift right. `select` is set for new-element gestures only.
        """
        if self.index_of(element.id) is not None:
            return rejected(DUPLICATE_ID, element.id)

        self._elements.insert(_clamp(index, len(self._elements)), element)
        if select:
            self._selected_id = element.id
        return applied(element.id)

    def move_existing(self, element_id: str, target_index: int) -> EditResult:
        """
        Remove the element and re-insert it at `target_index`.

        `target_index` is an index into the list *after* the removal; callers
        translating a drop zone must adjust for the shift first
        (see drag.effective_target). Selection is unchanged.
        """
        current = self.index_of(element_id)
        if current is None:
            return rejected(NOT_FOUND, element_id)

        moved = self._elements.pop(current)
        self._elements.insert(_clamp(target_index, len(self._elements)), moved)
        return applied(element_id)

    def replace_properties(
        self,
        element_id: str,
        new_properties: dict[str, Any] | ElementProps,
    ) -> EditResult:
        """Replace the element's whole property record. No partial updates."""
        current = self.index_of(element_id)
        if current is None:
            return rejected(NOT_FOUND, element_id)

        old = self._elements[current]
        try:
            record = validate_properties(old.kind, new_properties)
        except InvalidProperties:
            return rejected(INVALID_PROPERTIES, element_id)

        self._elements[current] = Element(id=old.id, props=record)
        return applied(element_id)

    def remove(self, element_id: str) -> EditResult:
        current = self.index_of(element_id)
        if current is None:
            return rejected(NOT_FOUND, element_id)

        del self._elements[current]
        if self._selected_id == element_id:
            self._selected_id = None
        return applied(element_id)

    def select(self, element_id: str | None) -> None:
        # Precondition: element_id is None or present. Not checked.
        self._selected_id = element_id

    def duplicate(self, element_id: str) -> EditResult:
        """Insert a copy with a fresh id immediately after the original."""
        current = self.index_of(element_id)
        if current is None:
            return rejected(NOT_FOUND, element_id)

        copy = clone_as_new(self._elements[current])
        self._elements.insert(current + 1, copy)
        return applied(copy.id)

    def replace_all(self, title: str, elements: list[Element]) -> None:
        """Swap in a whole document (load). Clears the selection."""
        seen: set[str] = set()
        for el in elements:
            if el.id in seen:
                raise ValueError(f"duplicate element id in document: {el.id}")
            seen.add(el.id)

        self.title = title
        self._elements = list(elements)
        self._selected_id = None

    # -- export ------------------------------------------------------------

    def to_payload(self, status: str) -> dict[str, Any]:
        """Flat save payload. Later edits do not affect the returned dict."""
        return {
            "title": self.title,
            "layout": layout_to_wire(self._elements),
            "status": status,
        }
