"""
Document State Test Suite

Test Files:
1. test_document_ops.py - Insert, move, replace, remove, select, duplicate, load
2. test_document_invariants.py - Unique ids and valid selection under random edits
"""
