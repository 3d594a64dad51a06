"""
Data models for query analysis.

Defines the parsed query produced by the QueryParser and the upstream
search-result shape the highlighter consumes (matched fields and the
search context mirrored from query classification).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class QueryType(str, Enum):
    """Classification of a raw search query."""
    SIMPLE = "simple"
    PHRASE = "phrase"
    COMPLEX = "complex"


@dataclass(frozen=True)
class ParsedQuery:
    """
    Structural analysis of a search query.

    Attributes:
        query_type: simple, phrase or complex classification.
        phrase_parts: Quoted phrases in order of appearance, quotes stripped.
        detected_operators: AND / OR tokens outside quotes, in order,
            duplicates kept.
        word_count: Number of non-operator words, quote characters removed.
        normalized_query: Whitespace-collapsed query with operators in
            database form (``&`` / ``|``).
        original_query: The trimmed input query.
        estimated_complexity: Rough 0-10 score of query complexity.
    """
    query_type: QueryType = QueryType.SIMPLE
    phrase_parts: Tuple[str, ...] = ()
    detected_operators: Tuple[str, ...] = ()
    word_count: int = 0
    normalized_query: str = ""
    original_query: str = ""
    estimated_complexity: float = 0.0

    @property
    def is_empty(self) -> bool:
        """True when the query held no words at all."""
        return self.word_count == 0 and not self.phrase_parts


@dataclass(frozen=True)
class SearchContext:
    """
    Query descriptor attached to search results by the search service.

    Attributes:
        query_type: Classification mirrored from ParsedQuery.
        normalized_query: Normalized query mirrored from ParsedQuery.
        execution_time_ms: Time the upstream search took.
    """
    query_type: QueryType
    normalized_query: str
    execution_time_ms: float = 0.0


@dataclass
class ArticleSearchResult:
    """
    A single article returned by the upstream search service.

    Only the fields the highlighter reads are modelled. ``matched_fields``
    lists the fields the server-side search matched and is a display hint;
    it never changes how text is highlighted.
    """
    id: str
    title: str
    content: str = ""
    author: str = ""
    tags: List[str] = field(default_factory=list)
    snippet: str = ""
    relevance_score: float = 0.0
    matched_fields: List[str] = field(default_factory=list)
    search_context: Optional[SearchContext] = None


if __name__ == "__main__":
    parsed = ParsedQuery(
        query_type=QueryType.PHRASE,
        phrase_parts=("machine learning",),
        detected_operators=("AND",),
        word_count=3,
        normalized_query='"machine learning" & javascript'
    )
    print(f"Parsed: {parsed}")

    result = ArticleSearchResult(
        id="1",
        title="Machine Learning in Modern JavaScript Applications",
        author="John Doe",
        tags=["JavaScript", "Machine Learning"],
        matched_fields=["title", "tags"],
        search_context=SearchContext(QueryType.PHRASE, parsed.normalized_query, 42.5)
    )
    print(f"\nResult: {result.title} matched in {result.matched_fields}")
