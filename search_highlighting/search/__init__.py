"""
Search module for query analysis.

Provides the query parser, term extraction and the models shared with
the upstream search service (parsed queries, search context, results).
"""

from .models import ParsedQuery, QueryType, SearchContext, ArticleSearchResult
from .query_parser import (
    QueryParser,
    parse_search_query,
    validate_search_query,
    extract_terms_from_query,
    build_search_context
)

__all__ = [
    "ParsedQuery",
    "QueryType",
    "SearchContext",
    "ArticleSearchResult",
    "QueryParser",
    "parse_search_query",
    "validate_search_query",
    "extract_terms_from_query",
    "build_search_context"
]
