"""
Builder Kernel — Inspector Binding

Maps the selected element's kind to its editable form and routes field edits
back into the document as whole-record replacements.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from builder.kernel.document import DocumentState
from builder.kernel.types import (
    INVALID_VALUE,
    NO_SELECTION,
    UNKNOWN_FIELD,
    EditResult,
    rejected,
)

# ---------------------------------------------------------------------------
# Field specs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldSpec:
    """One control of the inspector form."""

    name: str
    label: str
    control: str  # "textarea" | "input" | "select"
    options: tuple[tuple[Any, str], ...] = ()
    placeholder: str | None = None

    def coerce(self, raw: Any) -> Any:
        """
        Convert a raw control value to the property's type.

        Select controls report option values as strings; integer options are
        converted back. Raises ValueError for a value outside the options.
        """
        if not self.options:
            if not isinstance(raw, str):
                raise ValueError(f"{self.name}: expected text, got {type(raw).__name__}")
            return raw
        if isinstance(raw, bool):
            raise ValueError(f"{self.name}: {raw!r} is not one of the options")
        for value, _label in self.options:
            if raw == value or str(raw) == str(value):
                return value
        raise ValueError(f"{self.name}: {raw!r} is not one of the options")


@dataclass(frozen=True)
class BoundField:
    """A field spec paired with the selected element's current value."""

    spec: FieldSpec
    value: Any

    @property
    def name(self) -> str:
        return self.spec.name


ALIGN_OPTIONS = (("left", "Left"), ("center", "Center"), ("right", "Right"))

TEXT = FieldSpec("text", "Text", "textarea")
LEVEL = FieldSpec("level", "Level", "select", options=((1, "H1"), (2, "H2"), (3, "H3")))
ALIGN = FieldSpec("align", "Align", "select", options=ALIGN_OPTIONS)
IMAGE_SRC = FieldSpec("src", "Image URL", "input", placeholder="https://...")
IMAGE_ALT = FieldSpec("alt", "Alt", "input", placeholder="Description")
IMAGE_WIDTH = FieldSpec("width", "Width", "input", placeholder="e.g. 100%, 600px")
BUTTON_LABEL = FieldSpec("label", "Label", "input")
BUTTON_HREF = FieldSpec("href", "Link", "input")
BUTTON_VARIANT = FieldSpec(
    "variant", "Style", "select", options=(("primary", "Primary"), ("secondary", "Secondary"))
)
SEPARATOR_STYLE = FieldSpec(
    "style", "Style", "select", options=(("solid", "Solid"), ("dashed", "Dashed"), ("dotted", "Dotted"))
)

KIND_FIELDS: dict[str, tuple[FieldSpec, ...]] = {
    "heading": (TEXT, LEVEL, ALIGN),
    "paragraph": (TEXT, ALIGN),
    "image": (IMAGE_SRC, IMAGE_ALT, IMAGE_WIDTH),
    "button": (ALIGN, BUTTON_LABEL, BUTTON_HREF, BUTTON_VARIANT),
    "separator": (SEPARATOR_STYLE,),
}


# ---------------------------------------------------------------------------
# Binding
# ---------------------------------------------------------------------------


class InspectorBinding:
    """The property panel of one document."""

    def __init__(self, document: DocumentState) -> None:
        self.document = document

    @property
    def kind(self) -> str | None:
        element = self.document.selected
        return element.kind if element else None

    @property
    def can_delete(self) -> bool:
        return self.document.selected is not None

    def fields(self) -> list[BoundField]:
        element = self.document.selected
        if element is None:
            return []
        props = element.properties
        return [BoundField(spec, props[spec.name]) for spec in KIND_FIELDS[element.kind]]

    def edit(self, name: str, raw_value: Any) -> EditResult:
        """Set one field; the document receives the full property record."""
        element = self.document.selected
        if element is None:
            return rejected(NO_SELECTION)

        spec = next((s for s in KIND_FIELDS[element.kind] if s.name == name), None)
        if spec is None:
            return rejected(UNKNOWN_FIELD, element.id)
        try:
            value = spec.coerce(raw_value)
        except ValueError:
            return rejected(INVALID_VALUE, element.id)

        return self.document.replace_properties(element.id, {**element.properties, name: value})

    def delete(self) -> EditResult:
        element = self.document.selected
        if element is None:
            return rejected(NO_SELECTION)
        return self.document.remove(element.id)
