"""
Utility module providing shared helper functions.

Contains text processing utilities used by the query parser and the
highlighter. Depends only on the core module.
"""

from .text_utils import (
    normalize_whitespace,
    snap_to_whitespace,
    ensure_text
)

__all__ = [
    "normalize_whitespace",
    "snap_to_whitespace",
    "ensure_text"
]
