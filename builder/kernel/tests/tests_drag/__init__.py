"""
Drag-Reorder Engine Test Suite

Test Files:
1. test_drag_reorder.py - Move tie-break and every drop zone
2. test_drag_gestures.py - Palette drops, payloads, pending gesture lifecycle
"""
