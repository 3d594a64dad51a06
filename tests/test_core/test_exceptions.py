"""
Tests for custom exception classes.

Tests exception creation, message formatting, and details handling.
"""

import pytest

from search_highlighting.core.exceptions import (
    HighlightingError,
    ConfigurationError,
    QueryParseError,
    SanitizationError
)


class TestHighlightingError:
    """Tests for base HighlightingError."""

    def test_basic_creation(self):
        """Test creating exception with just a message."""
        error = HighlightingError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.details == {}
        assert str(error) == "Something went wrong"

    def test_creation_with_details(self):
        """Test creating exception with details dict."""
        error = HighlightingError("Bad input", {"field": "title", "length": 12})

        assert error.details["field"] == "title"
        assert error.details["length"] == 12


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_can_be_caught_as_base(self):
        """Test that ConfigurationError can be caught as HighlightingError."""
        with pytest.raises(HighlightingError):
            raise ConfigurationError("Test error")


class TestQueryParseError:
    """Tests for QueryParseError."""

    def test_with_query(self):
        """Test QueryParseError keeps the offending query."""
        error = QueryParseError("Unbalanced quotes", query='"machine')

        assert error.query == '"machine'
        assert error.message == "Unbalanced quotes"
        assert isinstance(error, HighlightingError)


class TestSanitizationError:
    """Tests for SanitizationError."""

    def test_with_fragment_and_details(self):
        """Test SanitizationError keeps fragment and details."""
        error = SanitizationError(
            "Could not sanitize",
            fragment="<scr",
            details={"position": 0}
        )

        assert error.fragment == "<scr"
        assert error.details["position"] == 0
