"""
Repository layer for the page store.

All page storage lives here and ONLY here.
"""

from backend.repos.page_repo import MemoryPageRepo, PageRepo

__all__ = [
    "PageRepo",
    "MemoryPageRepo",
]
