"""
Renderer Tests

One test per element kind, then the editor canvas (selection marker and drop
zones) and the standalone page. Content must be HTML-escaped.
"""

from builder.kernel.elements import Element, default_properties, validate_properties
from builder.kernel.renderer import render_canvas, render_element, render_page


def make_element(element_id, kind, **props):
    return Element(id=element_id, props=validate_properties(kind, {**default_properties(kind), **props}))


def assert_contains(html, *fragments):
    for fragment in fragments:
        assert fragment in html, f"Expected to find {fragment!r} in rendered HTML.\nGot:\n{html}"


class TestElementKinds:
    def test_heading_level_and_alignment(self):
        html = render_element(make_element("h", "heading", text="Hello", level=1, align="center"))
        assert_contains(html, '<div class="text-center">', '<h1 class="text-4xl font-bold">Hello</h1>')

    def test_paragraph(self):
        html = render_element(make_element("p", "paragraph", text="Some text", align="right"))
        assert_contains(html, '<p class="text-right text-gray-700 leading-relaxed">Some text</p>')

    def test_image(self):
        html = render_element(make_element("i", "image", src="https://x.test/a.png", alt="A", width="50%"))
        assert_contains(html, 'src="https://x.test/a.png"', 'alt="A"', 'style="width: 50%"')

    def test_button_variants(self):
        primary = render_element(make_element("b", "button", label="Buy", href="/buy"))
        secondary = render_element(make_element("b", "button", variant="secondary"))
        assert_contains(primary, 'href="/buy"', ">Buy</a>", "bg-blue-600")
        assert_contains(secondary, "bg-gray-200")

    def test_separator_style(self):
        html = render_element(make_element("s", "separator", style="dashed"))
        assert_contains(html, "<hr", "border-top-style: dashed")

    def test_content_is_escaped(self):
        html = render_element(make_element("p", "paragraph", text='<script>alert("x")</script>'))
        assert "<script>" not in html
        assert_contains(html, "&lt;script&gt;")


class TestCanvas:
    def test_drop_zones_surround_elements(self):
        elements = [make_element("A", "heading"), make_element("B", "separator")]
        html = render_canvas(elements)
        assert html.count('class="builder-drop-zone"') == 3
        assert html.index('data-index="0"') < html.index('data-element-id="A"')
        assert html.index('data-element-id="A"') < html.index('data-index="1"')
        assert html.index('data-element-id="B"') < html.index('data-index="2"')

    def test_selected_marker(self):
        elements = [make_element("A", "heading"), make_element("B", "separator")]
        html = render_canvas(elements, selected_id="B")
        assert html.count("is-selected") == 1
        assert_contains(html, 'class="builder-element is-selected" data-element-id="B"')

    def test_empty_canvas_has_one_zone(self):
        assert render_canvas([]) == '<div class="builder-drop-zone" data-index="0"></div>'

    def test_deterministic(self):
        elements = [make_element("A", "heading"), make_element("B", "paragraph")]
        assert render_canvas(elements, "A") == render_canvas(elements, "A")


class TestPage:
    def test_page_document(self):
        html = render_page("My <Page>", [make_element("A", "heading", text="Hi")])
        assert html.startswith("<!DOCTYPE html>")
        assert_contains(html, "<title>My &lt;Page&gt;</title>", "Hi</h2>")
        assert "builder-drop-zone" not in html
