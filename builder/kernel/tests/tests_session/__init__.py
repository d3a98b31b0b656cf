"""
Editor Session Test Suite

Test Files:
1. test_session_editing.py - Palette clicks, duplicate, delete, render
2. test_session_persistence.py - Save, load, page list and store failures
"""
