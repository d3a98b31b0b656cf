"""
Element Model Tests

Defaults, schema completeness, cloning, property validation and the wire
codec (including documents written with the legacy kind tags).
"""

import pytest

from builder.kernel.elements import (
    PALETTE,
    PROPERTY_MODELS,
    Element,
    HeadingProps,
    InvalidElement,
    InvalidProperties,
    UnknownElementKind,
    clone_as_new,
    create_default,
    element_from_wire,
    element_to_wire,
    layout_from_wire,
    schema_keys,
    validate_properties,
)
from builder.kernel.types import ELEMENT_KINDS

EXPECTED_SCHEMAS = {
    "heading": {"text", "level", "align"},
    "paragraph": {"text", "align"},
    "image": {"src", "alt", "width"},
    "button": {"label", "href", "variant", "align"},
    "separator": {"style"},
}


# ============================================================================
# Defaults
# ============================================================================


class TestCreateDefault:
    @pytest.mark.parametrize("kind", ELEMENT_KINDS)
    def test_default_keys_match_schema(self, kind):
        el = create_default(kind)
        assert el.kind == kind
        assert set(el.properties) == EXPECTED_SCHEMAS[kind]
        assert set(schema_keys(kind)) == EXPECTED_SCHEMAS[kind]

    def test_heading_defaults(self):
        assert create_default("heading").properties == {"text": "Your Heading", "level": 2, "align": "left"}

    def test_button_defaults(self):
        assert create_default("button").properties == {
            "label": "Click Me",
            "href": "#",
            "variant": "primary",
            "align": "left",
        }

    def test_image_and_separator_defaults(self):
        image = create_default("image").properties
        assert image["alt"] == "Image"
        assert image["width"] == "100%"
        assert image["src"].startswith("https://")
        assert create_default("separator").properties == {"style": "solid"}

    def test_unknown_kind_raises(self):
        with pytest.raises(UnknownElementKind):
            create_default("video")

    def test_fresh_ids(self):
        made = {create_default("paragraph").id for _ in range(200)}
        assert len(made) == 200

    def test_registry_covers_every_kind(self):
        assert tuple(PROPERTY_MODELS) == ELEMENT_KINDS
        assert [kind for kind, _label in PALETTE] == list(ELEMENT_KINDS)


class TestCloneAsNew:
    def test_clone_copies_properties_under_new_id(self):
        original = Element(id="orig", props=HeadingProps(text="Hello", level=1, align="center"))
        clone = clone_as_new(original)
        assert clone.id != original.id
        assert clone.kind == original.kind
        assert clone.properties == original.properties


# ============================================================================
# Validation
# ============================================================================


class TestValidateProperties:
    def test_exact_keys_accepted(self):
        record = validate_properties("heading", {"text": "x", "level": 3, "align": "right"})
        assert record.model_dump() == {"text": "x", "level": 3, "align": "right"}

    def test_missing_key_rejected(self):
        with pytest.raises(InvalidProperties):
            validate_properties("heading", {"text": "x", "level": 3})

    def test_extra_key_rejected(self):
        with pytest.raises(InvalidProperties):
            validate_properties("separator", {"style": "solid", "color": "red"})

    def test_enum_value_rejected(self):
        with pytest.raises(InvalidProperties):
            validate_properties("heading", {"text": "x", "level": 4, "align": "left"})
        with pytest.raises(InvalidProperties):
            validate_properties("button", {"label": "a", "href": "#", "variant": "ghost", "align": "left"})

    def test_wrong_type_rejected(self):
        with pytest.raises(InvalidProperties):
            validate_properties("heading", {"text": "x", "level": "2", "align": "left"})
        with pytest.raises(InvalidProperties):
            validate_properties("paragraph", {"text": 5, "align": "left"})

    def test_record_of_other_kind_rejected(self):
        with pytest.raises(InvalidProperties):
            validate_properties("paragraph", HeadingProps())

    def test_records_are_frozen(self):
        record = HeadingProps()
        with pytest.raises(Exception):
            record.text = "changed"


# ============================================================================
# Wire codec
# ============================================================================


class TestWireCodec:
    def test_encode(self):
        el = Element(id="e1", props=HeadingProps())
        assert element_to_wire(el) == {
            "id": "e1",
            "type": "heading",
            "props": {"text": "Your Heading", "level": 2, "align": "left"},
        }

    @pytest.mark.parametrize("kind", ELEMENT_KINDS)
    def test_decode_encoded(self, kind):
        el = create_default(kind)
        assert element_from_wire(element_to_wire(el)) == el

    def test_legacy_tags(self):
        text = element_from_wire({"id": "t", "type": "text", "props": {"text": "hi", "align": "center"}})
        divider = element_from_wire({"id": "d", "type": "divider", "props": {"style": "dotted"}})
        assert text.kind == "paragraph"
        assert text.properties == {"text": "hi", "align": "center"}
        assert divider.kind == "separator"
        assert divider.properties == {"style": "dotted"}

    def test_missing_props_filled_and_unknown_dropped(self):
        el = element_from_wire({"id": "b", "type": "button", "props": {"label": "Buy", "color": "red"}})
        assert el.properties == {"label": "Buy", "href": "#", "variant": "primary", "align": "left"}

    @pytest.mark.parametrize(
        "obj",
        [
            None,
            "heading",
            {"type": "heading", "props": {}},
            {"id": "", "type": "heading"},
            {"id": "x", "type": "video"},
            {"id": "x", "type": "heading", "props": []},
            {"id": "x", "type": "heading", "props": {"level": 9}},
        ],
    )
    def test_malformed_element(self, obj):
        with pytest.raises(InvalidElement):
            element_from_wire(obj)

    def test_layout_not_a_list_is_empty(self):
        assert layout_from_wire(None) == []
        assert layout_from_wire({"a": 1}) == []
        assert layout_from_wire("nope") == []

    def test_layout_drops_bad_entries_and_duplicates(self):
        layout = [
            {"id": "a", "type": "heading", "props": {}},
            {"id": "b", "type": "video", "props": {}},
            {"id": "a", "type": "paragraph", "props": {}},
            {"id": "c", "type": "separator", "props": {"style": "dashed"}},
        ]
        decoded = layout_from_wire(layout)
        assert [el.id for el in decoded] == ["a", "c"]
        assert decoded[0].kind == "heading"
