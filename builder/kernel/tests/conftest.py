"""
Builder kernel test configuration.

Shared fixtures: documents with known element ids so positional assertions
read as letters.
"""

import pytest

from builder.kernel.document import DocumentState
from builder.kernel.elements import Element, default_properties, validate_properties


def make_element(element_id: str, kind: str = "paragraph", **props) -> Element:
    """Element with a fixed id; unspecified properties take the kind's defaults."""
    merged = {**default_properties(kind), **props}
    return Element(id=element_id, props=validate_properties(kind, merged))


def ids(document: DocumentState) -> list[str]:
    return [el.id for el in document.elements]


@pytest.fixture
def empty_doc():
    return DocumentState(title="Test Page")


@pytest.fixture
def doc_abcd():
    """[A, B, C, D] — one of each text-ish kind, nothing selected."""
    return DocumentState(
        title="Test Page",
        elements=[
            make_element("A", "heading", text="Title"),
            make_element("B", "paragraph", text="Body"),
            make_element("C", "button", label="Go"),
            make_element("D", "separator"),
        ],
    )
