"""
Search-result highlighting engine.

Parses free-form search queries, marks matching terms inside article
fields with coloured, sanitized markup, and truncates long text around
the matches.
"""

__version__ = "1.0.0"

from .search import (
    ParsedQuery,
    QueryType,
    SearchContext,
    parse_search_query,
    extract_terms_from_query,
    build_search_context
)
from .highlight import (
    FieldType,
    HighlightOptions,
    HighlightResult,
    highlight_text,
    highlight_with_field_context,
    batch_highlight,
    sanitize
)

__all__ = [
    "ParsedQuery",
    "QueryType",
    "SearchContext",
    "parse_search_query",
    "extract_terms_from_query",
    "build_search_context",
    "FieldType",
    "HighlightOptions",
    "HighlightResult",
    "highlight_text",
    "highlight_with_field_context",
    "batch_highlight",
    "sanitize"
]
