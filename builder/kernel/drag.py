"""
Builder Kernel — Drag-Reorder Engine

Turns drag gestures into document operations.

Two gestures:
  new   — a palette item is dragged in; on drop a default element of that
          kind is inserted at the drop index and selected
  move  — an existing element is dragged; on drop it is moved to the drop
          index, adjusted for the gap its removal leaves behind

The canvas exposes len(document) + 1 drop zones: 0 is before the first
element, len(document) is after the last. Dropping onto an element itself is
a select, never a reorder.

The gesture is held in memory from drag start until drop or cancel. Drag start
also returns the gesture serialized as JSON, and a drop may hand a raw payload
back (from a platform transfer channel); a payload that does not decode to a
gesture is ignored without touching the document.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from builder.kernel.document import DocumentState
from builder.kernel.elements import create_default
from builder.kernel.types import (
    ELEMENT_KINDS,
    GESTURE_MOVE,
    GESTURE_NEW,
    IGNORED_GESTURE,
    NOT_FOUND,
    EditResult,
    rejected,
    resolve_kind,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Gestures
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NewElementGesture:
    element_kind: str

    def to_dict(self) -> dict[str, Any]:
        return {"kind": GESTURE_NEW, "type": self.element_kind}


@dataclass(frozen=True)
class MoveGesture:
    id: str

    def to_dict(self) -> dict[str, Any]:
        return {"kind": GESTURE_MOVE, "id": self.id}


Gesture = NewElementGesture | MoveGesture


def encode_gesture(gesture: Gesture) -> str:
    return json.dumps(gesture.to_dict())


def decode_gesture(payload: str | bytes | None) -> Gesture | None:
    """Parse a transfer payload. Returns None for anything malformed."""
    if not payload:
        return None
    try:
        data = json.loads(payload)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None

    tag = data.get("kind")
    if tag == GESTURE_NEW:
        element_type = data.get("type")
        kind = resolve_kind(element_type) if isinstance(element_type, str) else None
        if kind is None:
            return None
        return NewElementGesture(kind)

    if tag == GESTURE_MOVE:
        element_id = data.get("id")
        if not isinstance(element_id, str) or not element_id:
            return None
        return MoveGesture(element_id)

    return None


# ---------------------------------------------------------------------------
# Index arithmetic
# ---------------------------------------------------------------------------


def effective_target(current_index: int, drop_index: int) -> int:
    """
    Where a moved element lands once it has been taken out of the list.

    Removing the element shifts every later index down by one, so a drop zone
    after the element's current position is one too far.
    """
    if drop_index > current_index:
        return drop_index - 1
    return drop_index


def drop_zones(length: int) -> range:
    """Insertion points of a canvas holding `length` elements."""
    return range(length + 1)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class DragReorderEngine:
    """Applies drag gestures to one document."""

    def __init__(self, document: DocumentState) -> None:
        self.document = document
        self.pending: Gesture | None = None
        self.is_over = False  # canvas drop highlight

    def start_palette_drag(self, kind: str) -> str:
        """Begin dragging a new element of `kind`. Returns the transfer payload."""
        gesture = NewElementGesture(resolve_kind(kind) or kind)
        self.pending = gesture
        return encode_gesture(gesture)

    def start_element_drag(self, element_id: str) -> str:
        """Begin dragging an existing element. Returns the transfer payload."""
        gesture = MoveGesture(element_id)
        self.pending = gesture
        return encode_gesture(gesture)

    def drag_over(self) -> None:
        self.is_over = True

    def drag_leave(self) -> None:
        self.is_over = False

    def cancel(self) -> None:
        self.pending = None
        self.is_over = False

    def drop(self, index: int | None = None, payload: str | bytes | None = None) -> EditResult:
        """
        Complete the gesture at drop zone `index` (None: canvas background,
        i.e. after the last element). A raw `payload` wins over the pending
        gesture. The pending gesture is cleared whatever happens.
        """
        gesture = decode_gesture(payload) if payload is not None else self.pending
        self.pending = None
        self.is_over = False

        if gesture is None:
            logger.debug("drag: ignoring drop without a usable gesture payload=%r", payload)
            return rejected(IGNORED_GESTURE)

        drop_index = len(self.document) if index is None else index

        if isinstance(gesture, NewElementGesture):
            return self._drop_new(gesture, drop_index)
        return self._drop_move(gesture, drop_index)

    def drop_on_element(self, element_id: str) -> None:
        """A drop onto an element body behaves like a click on it."""
        self.pending = None
        self.is_over = False
        if self.document.index_of(element_id) is not None:
            self.document.select(element_id)

    # -- internals -----------------------------------------------------------

    def _drop_new(self, gesture: NewElementGesture, drop_index: int) -> EditResult:
        if gesture.element_kind not in ELEMENT_KINDS:
            logger.debug("drag: ignoring new-element drop of unknown kind %r", gesture.element_kind)
            return rejected(IGNORED_GESTURE)
        element = create_default(gesture.element_kind)
        return self.document.insert(element, drop_index, select=True)

    def _drop_move(self, gesture: MoveGesture, drop_index: int) -> EditResult:
        current = self.document.index_of(gesture.id)
        if current is None:
            logger.debug("drag: ignoring move of missing element %s", gesture.id)
            return rejected(NOT_FOUND, gesture.id)
        return self.document.move_existing(gesture.id, effective_target(current, drop_index))
