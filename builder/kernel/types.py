"""
Builder Kernel — Shared Types

Constants and small data classes used across the element model, document
state, drag engine, inspector, renderer and persistence gateway.
These are the contracts that bind the kernel together.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from builder.kernel.elements import Element

# ---------------------------------------------------------------------------
# Element kinds
# ---------------------------------------------------------------------------

ELEMENT_KINDS: tuple[str, ...] = (
    "heading",
    "paragraph",
    "image",
    "button",
    "separator",
)

# Older documents tag paragraphs as "text" and separators as "divider".
KIND_ALIASES: dict[str, str] = {
    "text": "paragraph",
    "divider": "separator",
}

ALIGN_VALUES: tuple[str, ...] = ("left", "center", "right")
HEADING_LEVELS: tuple[int, ...] = (1, 2, 3)
BUTTON_VARIANTS: tuple[str, ...] = ("primary", "secondary")
SEPARATOR_STYLES: tuple[str, ...] = ("solid", "dashed", "dotted")

# ---------------------------------------------------------------------------
# Gesture tags (drag transfer payload)
# ---------------------------------------------------------------------------

GESTURE_NEW = "new"
GESTURE_MOVE = "move"
GESTURE_MIME_TYPE = "application/json"

# ---------------------------------------------------------------------------
# Edit result reasons
# ---------------------------------------------------------------------------

NOT_FOUND = "NOT_FOUND"
DUPLICATE_ID = "DUPLICATE_ID"
INVALID_PROPERTIES = "INVALID_PROPERTIES"
UNKNOWN_FIELD = "UNKNOWN_FIELD"
INVALID_VALUE = "INVALID_VALUE"
NO_SELECTION = "NO_SELECTION"
IGNORED_GESTURE = "IGNORED_GESTURE"


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


class EditResult:
    """
    Result of applying one editing operation to a document.
    Editing operations never throw — they always return one of these.
    """

    __slots__ = ("applied", "reason", "element_id")

    def __init__(
        self,
        applied: bool,
        reason: str | None = None,
        element_id: str | None = None,
    ) -> None:
        self.applied = applied
        self.reason = reason
        self.element_id = element_id  # The element the operation touched, if any

    def __repr__(self) -> str:  # pragma: no cover
        if self.applied:
            return f"EditResult(applied=True, element_id={self.element_id!r})"
        return f"EditResult(applied=False, reason={self.reason!r})"


def applied(element_id: str | None = None) -> EditResult:
    return EditResult(applied=True, element_id=element_id)


def rejected(reason: str, element_id: str | None = None) -> EditResult:
    return EditResult(applied=False, reason=reason, element_id=element_id)


@dataclass
class PageSummary:
    """One entry of the page picker."""

    id: str
    title: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title}


@dataclass
class PageDocument:
    """A loaded page: its title and decoded, ordered layout."""

    title: str
    layout: list[Element] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def new_element_id() -> str:
    """Fresh 128-bit random identifier for an element."""
    return str(uuid.uuid4())


def resolve_kind(kind: str) -> str | None:
    """Map a kind tag (or one of its legacy aliases) to its canonical kind."""
    if kind in ELEMENT_KINDS:
        return kind
    return KIND_ALIASES.get(kind)
