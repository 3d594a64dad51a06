"""
Tests for query analysis models.

Tests ParsedQuery, SearchContext and ArticleSearchResult dataclasses.
"""

import dataclasses

import pytest

from search_highlighting.search.models import (
    ArticleSearchResult,
    ParsedQuery,
    QueryType,
    SearchContext
)


class TestParsedQuery:
    """Tests for ParsedQuery dataclass."""

    def test_defaults_describe_empty_query(self):
        """Test that the default instance is an empty simple query."""
        parsed = ParsedQuery()

        assert parsed.query_type == QueryType.SIMPLE
        assert parsed.phrase_parts == ()
        assert parsed.detected_operators == ()
        assert parsed.word_count == 0
        assert parsed.is_empty

    def test_is_immutable(self):
        """Test that parsed queries cannot be modified."""
        parsed = ParsedQuery(word_count=2)

        with pytest.raises(dataclasses.FrozenInstanceError):
            parsed.word_count = 3

    def test_query_type_compares_to_string(self):
        """Test that query types compare equal to their wire values."""
        assert QueryType.PHRASE == "phrase"
        assert QueryType("complex") is QueryType.COMPLEX


class TestArticleSearchResult:
    """Tests for ArticleSearchResult dataclass."""

    def test_result_creation_minimal(self):
        """Test creating a result with only id and title."""
        result = ArticleSearchResult(id="42", title="Machine Learning Guide")

        assert result.content == ""
        assert result.tags == []
        assert result.matched_fields == []
        assert result.search_context is None

    def test_result_lists_are_independent(self):
        """Test that default lists are not shared between instances."""
        first = ArticleSearchResult(id="1", title="a")
        second = ArticleSearchResult(id="2", title="b")

        first.tags.append("AI")

        assert second.tags == []

    def test_result_with_context(self):
        """Test attaching a search context."""
        context = SearchContext(QueryType.PHRASE, '"machine learning"', 42.5)
        result = ArticleSearchResult(id="1", title="t", search_context=context)

        assert result.search_context.execution_time_ms == 42.5
