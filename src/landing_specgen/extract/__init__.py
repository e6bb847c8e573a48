from __future__ import annotations

__all__ = [
    "extract_block",
    "find_iteration_template",
    "find_tagged_blocks",
    "find_matching",
    "sanitize_block",
]

from .extractor import extract_block as extract_block
from .extractor import find_iteration_template as find_iteration_template
from .extractor import find_tagged_blocks as find_tagged_blocks
from .sanitizer import sanitize_block as sanitize_block
from .scanner import find_matching as find_matching
