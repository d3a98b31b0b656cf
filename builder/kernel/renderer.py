"""
Builder Kernel — Renderer

Pure functions: element(s) → HTML string.
No IO. Deterministic: same input → same output, always.

Each kind has a Mustache template; values are HTML-escaped by chevron.
Two outputs:
  render_canvas — editor view: elements wrapped with selection state and the
                  len + 1 drop zones between them
  render_page   — the finished page as a standalone HTML document
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import chevron

from builder.kernel.drag import drop_zones
from builder.kernel.elements import Element

ALIGN_CLASSES = {
    "left": "text-left",
    "center": "text-center",
    "right": "text-right",
}

HEADING_CLASSES = {
    1: "text-4xl font-bold",
    2: "text-3xl font-semibold",
    3: "text-2xl font-semibold",
}

BUTTON_CLASSES = {
    "primary": "inline-block bg-blue-600 hover:bg-blue-700 text-white px-4 py-2 rounded",
    "secondary": "inline-block bg-gray-200 hover:bg-gray-300 text-gray-800 px-4 py-2 rounded",
}

TEMPLATES: dict[str, str] = {
    "heading": (
        '<div class="{{align_class}}">'
        '<h{{level}} class="{{heading_class}}">{{text}}</h{{level}}>'
        "</div>"
    ),
    "paragraph": '<p class="{{align_class}} text-gray-700 leading-relaxed">{{text}}</p>',
    "image": (
        '<div class="w-full">'
        '<img src="{{src}}" alt="{{alt}}" style="width: {{width}}" class="rounded">'
        "</div>"
    ),
    "button": '<div class="{{align_class}}"><a href="{{href}}" class="{{variant_class}}">{{label}}</a></div>',
    "separator": '<hr class="border-t border-gray-200" style="border-top-style: {{style}}">',
}

_WRAPPER = (
    '<div class="builder-element{{#selected}} is-selected{{/selected}}" '
    'data-element-id="{{id}}" data-kind="{{kind}}">{{{body}}}</div>'
)

_DROP_ZONE = '<div class="builder-drop-zone" data-index="{{index}}"></div>'

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{title}}</title>
</head>
<body>
<main class="builder-page">
{{{content}}}
</main>
</body>
</html>
"""

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render_element(element: Element) -> str:
    """HTML fragment for one element."""
    return chevron.render(TEMPLATES[element.kind], _context(element))


def render_canvas(elements: Iterable[Element], selected_id: str | None = None) -> str:
    """Editor canvas: drop zone, element, drop zone, ... drop zone."""
    elements = list(elements)
    parts: list[str] = []
    for index in drop_zones(len(elements)):
        parts.append(chevron.render(_DROP_ZONE, {"index": index}))
        if index < len(elements):
            el = elements[index]
            parts.append(
                chevron.render(
                    _WRAPPER,
                    {
                        "id": el.id,
                        "kind": el.kind,
                        "selected": el.id == selected_id,
                        "body": render_element(el),
                    },
                )
            )
    return "\n".join(parts)


def render_page(title: str, elements: Iterable[Element]) -> str:
    """Standalone HTML document for a page."""
    content = "\n".join(render_element(el) for el in elements)
    return chevron.render(_PAGE, {"title": title, "content": content})


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------


def _context(element: Element) -> dict[str, Any]:
    context = element.properties
    if "align" in context:
        context["align_class"] = ALIGN_CLASSES[context["align"]]
    if element.kind == "heading":
        context["heading_class"] = HEADING_CLASSES[context["level"]]
    if element.kind == "button":
        context["variant_class"] = BUTTON_CLASSES[context["variant"]]
    return context
