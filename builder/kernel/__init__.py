"""
Builder Kernel — the document editing engine.

Components:
  elements   — element kinds, property records, defaults, wire codec
  document   — ordered element list + selection; the only mutator
  drag       — drag gestures → insert/move operations
  inspector  — selected element → editable form → property replacement
  renderer   — elements → HTML (pure)
  gateway    — page store interface (+ in-memory store for tests)
  session    — wires the above to a gateway for one editor
"""

from builder.kernel.document import DocumentState
from builder.kernel.drag import DragReorderEngine, effective_target
from builder.kernel.elements import Element, clone_as_new, create_default
from builder.kernel.gateway import GatewayError, MemoryGateway, PageNotFound, PersistenceGateway
from builder.kernel.inspector import InspectorBinding
from builder.kernel.session import EditorSession

__all__ = [
    "Element",
    "create_default",
    "clone_as_new",
    "DocumentState",
    "DragReorderEngine",
    "effective_target",
    "InspectorBinding",
    "PersistenceGateway",
    "MemoryGateway",
    "GatewayError",
    "PageNotFound",
    "EditorSession",
]
