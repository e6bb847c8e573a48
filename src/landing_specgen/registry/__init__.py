from __future__ import annotations

__all__ = [
    "load_registry",
    "select_pages",
]

from .loader import load_registry as load_registry
from .selection import select_pages as select_pages
