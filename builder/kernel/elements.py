"""
Builder Kernel — Element Model

Each element kind has a property record type. An element holds exactly one
record, and the record's class is the element's kind. Records are frozen and
forbid extra keys, so an element can never carry a property its kind does not
define, nor lose one it does.

Also home to the wire codec: {"id": str, "type": str, "props": {...}}.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, ValidationError

from builder.kernel.types import new_element_id, resolve_kind

logger = logging.getLogger(__name__)

Align = Literal["left", "center", "right"]

PLACEHOLDER_IMAGE_URL = (
    "https://images.unsplash.com/photo-1498050108023-c5249f4df085?w=1200&q=80&auto=format&fit=crop"
)
LOREM_TEXT = "Lorem ipsum dolor sit amet, consectetur adipiscing elit."


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class UnknownElementKind(ValueError):
    """Kind tag is not one of the element kinds."""

    pass


class InvalidProperties(ValueError):
    """Property mapping does not match the kind's schema."""

    pass


class InvalidElement(ValueError):
    """Wire object cannot be decoded into an element."""

    pass


# ---------------------------------------------------------------------------
# Property records
# ---------------------------------------------------------------------------


class ElementProps(BaseModel):
    """Base for the per-kind property records."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    kind: ClassVar[str]


class HeadingProps(ElementProps):
    kind: ClassVar[str] = "heading"

    text: str = "Your Heading"
    level: Literal[1, 2, 3] = 2
    align: Align = "left"


class ParagraphProps(ElementProps):
    kind: ClassVar[str] = "paragraph"

    text: str = LOREM_TEXT
    align: Align = "left"


class ImageProps(ElementProps):
    kind: ClassVar[str] = "image"

    src: str = PLACEHOLDER_IMAGE_URL
    alt: str = "Image"
    width: str = "100%"


class ButtonProps(ElementProps):
    kind: ClassVar[str] = "button"

    label: str = "Click Me"
    href: str = "#"
    variant: Literal["primary", "secondary"] = "primary"
    align: Align = "left"


class SeparatorProps(ElementProps):
    kind: ClassVar[str] = "separator"

    style: Literal["solid", "dashed", "dotted"] = "solid"


PROPERTY_MODELS: dict[str, type[ElementProps]] = {
    model.kind: model
    for model in (HeadingProps, ParagraphProps, ImageProps, ButtonProps, SeparatorProps)
}

# What the palette offers, in display order.
PALETTE: tuple[tuple[str, str], ...] = (
    ("heading", "Heading"),
    ("paragraph", "Text"),
    ("image", "Image"),
    ("button", "Button"),
    ("separator", "Divider"),
)


# ---------------------------------------------------------------------------
# Element
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Element:
    """A node in the document. Replaced wholesale, never patched."""

    id: str
    props: ElementProps

    @property
    def kind(self) -> str:
        return self.props.kind

    @property
    def properties(self) -> dict[str, Any]:
        return self.props.model_dump()


def _model_for(kind: str) -> type[ElementProps]:
    model = PROPERTY_MODELS.get(kind)
    if model is None:
        raise UnknownElementKind(kind)
    return model


def schema_keys(kind: str) -> tuple[str, ...]:
    """Ordered property names of a kind."""
    return tuple(_model_for(kind).model_fields)


def default_properties(kind: str) -> dict[str, Any]:
    return _model_for(kind)().model_dump()


def validate_properties(kind: str, properties: dict[str, Any] | ElementProps) -> ElementProps:
    """
    Build the property record for `kind` from a mapping.

    The mapping must carry exactly the schema keys. Raises InvalidProperties
    otherwise, or when a value is outside its type/enum.
    """
    model = _model_for(kind)
    if isinstance(properties, ElementProps):
        if not isinstance(properties, model):
            raise InvalidProperties(f"{type(properties).__name__} is not a {kind} record")
        return properties
    if not isinstance(properties, dict):
        raise InvalidProperties("properties must be a mapping")

    keys = set(properties)
    expected = set(model.model_fields)
    if keys != expected:
        missing = sorted(expected - keys)
        extra = sorted(keys - expected)
        raise InvalidProperties(f"{kind}: missing={missing} extra={extra}")

    try:
        return model.model_validate(properties)
    except ValidationError as e:
        raise InvalidProperties(str(e)) from e


def create_default(kind: str) -> Element:
    """New element of `kind` with a fresh id and the kind's default properties."""
    return Element(id=new_element_id(), props=_model_for(kind)())


def clone_as_new(element: Element) -> Element:
    """Structural copy of `element` under a newly generated id."""
    return Element(id=new_element_id(), props=element.props.model_copy())


# ---------------------------------------------------------------------------
# Wire codec
# ---------------------------------------------------------------------------


def element_to_wire(element: Element) -> dict[str, Any]:
    return {"id": element.id, "type": element.kind, "props": element.properties}


def layout_to_wire(elements: list[Element]) -> list[dict[str, Any]]:
    return [element_to_wire(el) for el in elements]


def element_from_wire(obj: Any) -> Element:
    """
    Decode one wire element.

    Accepts legacy kind tags. Missing property keys are filled from the kind's
    defaults and unknown keys are discarded; a value of the wrong type is an
    error. Raises InvalidElement.
    """
    if not isinstance(obj, dict):
        raise InvalidElement("element must be an object")

    element_id = obj.get("id")
    if not isinstance(element_id, str) or not element_id:
        raise InvalidElement(f"invalid element id: {element_id!r}")

    tag = obj.get("type")
    kind = resolve_kind(tag) if isinstance(tag, str) else None
    if kind is None:
        raise InvalidElement(f"unknown element type: {tag!r}")

    props = obj.get("props")
    if props is None:
        props = {}
    if not isinstance(props, dict):
        raise InvalidElement(f"{element_id}: props must be an object")

    merged = default_properties(kind)
    for key in merged:
        if key in props:
            merged[key] = props[key]

    try:
        record = validate_properties(kind, merged)
    except InvalidProperties as e:
        raise InvalidElement(f"{element_id}: {e}") from e
    return Element(id=element_id, props=record)


def layout_from_wire(value: Any) -> list[Element]:
    """
    Decode a stored layout. A missing or non-list layout is empty.
    Undecodable entries and repeated ids are dropped.
    """
    if not isinstance(value, list):
        if value is not None:
            logger.warning("layout_from_wire: layout is not a list (%s), using empty layout", type(value).__name__)
        return []

    elements: list[Element] = []
    seen: set[str] = set()
    for raw in value:
        try:
            element = element_from_wire(raw)
        except InvalidElement as e:
            logger.warning("layout_from_wire: dropping element: %s", e)
            continue
        if element.id in seen:
            logger.warning("layout_from_wire: dropping duplicate element id %s", element.id)
            continue
        seen.add(element.id)
        elements.append(element)
    return elements
