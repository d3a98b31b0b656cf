"""
Inspector Binding Test Suite

Test Files:
1. test_inspector_binding.py - Per-kind forms, value coercion, edit and delete
"""
