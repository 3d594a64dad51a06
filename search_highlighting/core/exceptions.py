"""
Custom exception hierarchy for the highlighting engine.

Provides specific exception types for different failure modes:
configuration errors, query parsing problems and sanitization failures.
The public highlighting functions never let these escape; they are
raised internally and converted to safe fallbacks at the boundary.
"""


class HighlightingError(Exception):
    """Base exception for all highlighting engine errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(HighlightingError):
    """Raised when configuration is invalid or missing."""
    pass


class QueryParseError(HighlightingError):
    """Raised when a search query cannot be analysed."""

    def __init__(self, message: str, query: str = None, details: dict = None):
        """
        Initialize query parse error.

        Args:
            message: Error description.
            query: The problematic search query.
            details: Additional context.
        """
        super().__init__(message, details)
        self.query = query


class SanitizationError(HighlightingError):
    """Raised when markup cannot be reduced to the allow-list."""

    def __init__(self, message: str, fragment: str = None, details: dict = None):
        """
        Initialize sanitization error.

        Args:
            message: Error description.
            fragment: Excerpt of the markup that failed.
            details: Additional context.
        """
        super().__init__(message, details)
        self.fragment = fragment


if __name__ == "__main__":
    try:
        raise ConfigurationError("Config file not found", {"path": "/config/config.json"})
    except HighlightingError as e:
        print(f"Caught: {e.__class__.__name__}: {e.message}")
        print(f"Details: {e.details}")

    try:
        raise SanitizationError("Unsupported input", fragment="<scr")
    except SanitizationError as e:
        print(f"Sanitization failed on: {e.fragment}")
