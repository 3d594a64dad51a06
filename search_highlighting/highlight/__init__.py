"""
Highlight module for marking query terms in search results.

Provides the highlighting engine, field-specific profiles, the markup
sanitizer and performance recording.
"""

from .models import (
    FieldType,
    HighlightColor,
    HighlightOptions,
    HighlightLimits,
    HighlightMatch,
    HighlightResult,
    PerformanceStats
)
from .sanitizer import Sanitizer, sanitize, escape_text
from .performance import PerformanceRecorder
from .highlighter import Highlighter, highlight_text, batch_highlight
from .field_context import (
    FIELD_PROFILES,
    get_field_profile,
    highlight_with_field_context,
    highlight_article_fields,
    summarize_field_matches
)

__all__ = [
    "FieldType",
    "HighlightColor",
    "HighlightOptions",
    "HighlightLimits",
    "HighlightMatch",
    "HighlightResult",
    "PerformanceStats",
    "Sanitizer",
    "sanitize",
    "escape_text",
    "PerformanceRecorder",
    "Highlighter",
    "highlight_text",
    "batch_highlight",
    "FIELD_PROFILES",
    "get_field_profile",
    "highlight_with_field_context",
    "highlight_article_fields",
    "summarize_field_matches"
]
