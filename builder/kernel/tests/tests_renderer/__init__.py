"""
Renderer Test Suite

Test Files:
1. test_renderer_output.py - Element HTML, canvas drop zones, page document
"""
