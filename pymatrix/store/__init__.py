"""
Element store: the copy-on-write storage layer under Vector.

Public API:
    ElementStore  - mutable fixed-length store of shareable cells
    StoreView     - read-only window over a run of cells
"""

from pymatrix.store.store import Cell, ElementStore, StoreView

__all__ = [
    "Cell",
    "ElementStore",
    "StoreView",
]
