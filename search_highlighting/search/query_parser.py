"""
Query parser for search-result highlighting.

Classifies a free-form query as simple, phrase or complex, extracts quoted
phrases and boolean operators, and reduces the query to an ordered list
of match terms for the highlighter.
"""

import re
from typing import List, Optional, Tuple

from ..core import QueryParseError, get_logger
from ..utils import ensure_text, normalize_whitespace
from .models import ParsedQuery, QueryType, SearchContext

logger = get_logger(__name__)


# Database form of each recognised operator
OPERATORS = {"AND": "&", "OR": "|"}

QUOTE_CHARS = "\"'"

DEFAULT_MAX_QUERY_LENGTH = 500
DEFAULT_MAX_TERMS = 32
DEFAULT_MIN_TERM_LENGTH = 2

# Double quotes always delimit a phrase. A single quote does so only at a
# token boundary, so apostrophes inside words never start one.
_PHRASE_RE = re.compile(
    r'"([^"]+)"'
    r"|(?<!\w)'([^']+)'(?!\w)"
)

# A single quote at a token edge; apostrophes inside words do not match.
_LOOSE_SINGLE_QUOTE_RE = re.compile(r"(?<!\w)'|'(?!\w)")


class QueryParser:
    """
    Parses search queries into a ParsedQuery and a list of match terms.

    Instances hold only their limits, so one parser can be shared
    between threads.
    """

    def __init__(
        self,
        max_query_length: int = DEFAULT_MAX_QUERY_LENGTH,
        max_terms: int = DEFAULT_MAX_TERMS,
        min_term_length: int = DEFAULT_MIN_TERM_LENGTH
    ):
        """
        Initialize the parser.

        Args:
            max_query_length: Characters of query considered at most.
            max_terms: Upper bound on phrases and extracted terms.
            min_term_length: Terms shorter than this are dropped.
        """
        self.max_query_length = max_query_length
        self.max_terms = max_terms
        self.min_term_length = min_term_length

    def parse(self, query: str) -> ParsedQuery:
        """
        Classify a query and extract its phrases and operators.

        Args:
            query: Raw user input.

        Returns:
            ParsedQuery describing the query. Empty input yields a
            simple query with no words.
        """
        query = ensure_text(query, "query")
        if not query.strip():
            return ParsedQuery()

        trimmed = query.strip()[:self.max_query_length]
        segments = self._split_segments(trimmed)

        phrases = []
        operators = []
        words = []
        normalized_parts = []

        for is_phrase, content in segments:
            if is_phrase:
                phrases.append(content)
                words.extend(w for w in content.split() if self._strip_quotes(w))
                normalized_parts.append(f'"{normalize_whitespace(content)}"')
                continue

            for token in content.split():
                if token in OPERATORS:
                    operators.append(token)
                    normalized_parts.append(OPERATORS[token])
                    continue

                normalized_parts.append(token)
                if self._strip_quotes(token):
                    words.append(token)

        distinct_operators = set(operators)
        if len(distinct_operators) >= 2:
            query_type = QueryType.COMPLEX
        elif phrases:
            query_type = QueryType.PHRASE
        else:
            query_type = QueryType.SIMPLE

        complexity = min(10.0, len(words) * 0.5 + len(phrases) * 2 + len(operators) * 1.5)

        parsed = ParsedQuery(
            query_type=query_type,
            phrase_parts=tuple(phrases),
            detected_operators=tuple(operators),
            word_count=len(words),
            normalized_query=" ".join(normalized_parts),
            original_query=trimmed,
            estimated_complexity=complexity
        )

        logger.debug(f"Parsed query '{trimmed}' as {query_type.value}")
        return parsed

    def validate(self, query: str) -> ParsedQuery:
        """
        Parse a query, rejecting constructs that parse() silently tolerates.

        The highlighter never calls this; it is for interfaces that want to
        tell the user their query was read leniently.

        Args:
            query: Raw user input.

        Returns:
            ParsedQuery for a well-formed query.

        Raises:
            QueryParseError: If the query is too long, has an empty or
                unterminated quote, or an operator without an operand.
        """
        query = ensure_text(query, "query")
        stripped = query.strip()

        if len(stripped) > self.max_query_length:
            raise QueryParseError(
                f"Query is longer than {self.max_query_length} characters",
                query=query,
                details={"length": len(stripped)}
            )

        outside = _PHRASE_RE.sub(" ", stripped)
        if '"' in outside or _LOOSE_SINGLE_QUOTE_RE.search(outside):
            raise QueryParseError("Empty or unterminated quote", query=query)

        tokens = []
        for is_phrase, content in self._split_segments(stripped):
            if is_phrase:
                tokens.append(None)
            else:
                tokens.extend(content.split())

        for index, token in enumerate(tokens):
            if token not in OPERATORS:
                continue
            before = tokens[index - 1] if index > 0 else None
            after = tokens[index + 1] if index + 1 < len(tokens) else None
            if index == 0 or index == len(tokens) - 1 or before in OPERATORS or after in OPERATORS:
                raise QueryParseError(
                    f"Operator {token} is missing an operand",
                    query=query,
                    details={"position": index}
                )

        return self.parse(query)

    def extract_terms(self, query: str, parsed: Optional[ParsedQuery] = None) -> List[str]:
        """
        Reduce a query to an ordered, deduplicated list of match terms.

        Phrases come first (in order of appearance), then the words inside
        those phrases, then standalone words. Terms are only split on
        whitespace and quotes, so ``node.js`` stays one term. Duplicates are
        collapsed case-insensitively, keeping the first-seen casing.

        Args:
            query: Raw user input.
            parsed: Optional pre-computed analysis of the same query.

        Returns:
            List of terms, at most ``max_terms`` long.
        """
        query = ensure_text(query, "query")
        if not query.strip():
            return []

        if parsed is None:
            parsed = self.parse(query)

        terms: List[str] = []
        seen = set()

        def add(term: str) -> None:
            if len(terms) >= self.max_terms:
                return
            if len(term) < self.min_term_length:
                return
            key = term.casefold()
            if key in seen:
                return
            seen.add(key)
            terms.append(term)

        for phrase in parsed.phrase_parts:
            add(normalize_whitespace(phrase))

        for phrase in parsed.phrase_parts:
            for word in phrase.split():
                add(self._strip_quotes(word))

        trimmed = query.strip()[:self.max_query_length]
        for is_phrase, content in self._split_segments(trimmed):
            if is_phrase:
                continue
            for token in content.split():
                if token in OPERATORS:
                    continue
                add(self._strip_quotes(token))

        return terms

    def _split_segments(self, query: str) -> List[Tuple[bool, str]]:
        """
        Split a query into quoted phrases and the text between them.

        Returns:
            List of (is_phrase, content) pairs in query order. Phrase content
            has its delimiters removed; blank phrases are kept as plain text.
        """
        segments = []
        last = 0
        phrase_count = 0

        for match in _PHRASE_RE.finditer(query):
            content = match.group(1) if match.group(1) is not None else match.group(2)
            if not content.strip() or phrase_count >= self.max_terms:
                continue

            if match.start() > last:
                segments.append((False, query[last:match.start()]))
            segments.append((True, content))
            phrase_count += 1
            last = match.end()

        if last < len(query):
            segments.append((False, query[last:]))

        return segments

    @staticmethod
    def _strip_quotes(token: str) -> str:
        """Remove quote characters from the edges of a token."""
        return token.strip(QUOTE_CHARS)


_default_parser = QueryParser()


def parse_search_query(query: str) -> ParsedQuery:
    """Classify a query with the default parser limits."""
    return _default_parser.parse(query)


def validate_search_query(query: str) -> ParsedQuery:
    """Strictly parse a query with the default parser limits. See QueryParser.validate."""
    return _default_parser.validate(query)


def extract_terms_from_query(query: str, parsed: Optional[ParsedQuery] = None) -> List[str]:
    """Extract match terms with the default parser limits."""
    return _default_parser.extract_terms(query, parsed)


def build_search_context(query: str, execution_time_ms: float = 0.0) -> SearchContext:
    """
    Build the search_context descriptor attached to search results.

    Args:
        query: Raw user query.
        execution_time_ms: Duration of the upstream search.

    Returns:
        SearchContext mirroring the query classification.
    """
    parsed = parse_search_query(query)
    return SearchContext(
        query_type=parsed.query_type,
        normalized_query=parsed.normalized_query,
        execution_time_ms=execution_time_ms
    )


if __name__ == "__main__":
    parser = QueryParser()

    print("=== Classification ===")
    test_queries = [
        "machine learning",
        '"machine learning" AND "javascript"',
        "machine AND learning OR javascript",
        "'machine learning' AND \"artificial intelligence\"",
        '"unterminated phrase',
        ""
    ]

    for q in test_queries:
        result = parser.parse(q)
        print(f"  '{q}' -> {result.query_type.value} {list(result.phrase_parts)} "
              f"{list(result.detected_operators)} words={result.word_count}")

    print("\n=== Term Extraction ===")
    for q in ['"machine learning" javascript', "node.js react.js", "machine machine learning"]:
        print(f"  '{q}' -> {parser.extract_terms(q)}")
