"""
Highlighting engine for search results.

Locates query terms in field text, wraps each occurrence in a coloured
``<mark>`` marker, truncates long text around the first match and passes
the result through the sanitizer. Every call is a pure function of its
arguments; the engine keeps no state between calls.
"""

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Pattern, Sequence, Tuple, Union

from ..core import Config, get_logger
from ..search import QueryParser
from ..utils import ensure_text, snap_to_whitespace
from .models import (
    HighlightColor,
    HighlightLimits,
    HighlightMatch,
    HighlightOptions,
    HighlightResult,
    PerformanceStats,
)
from .performance import PerformanceRecorder
from .sanitizer import escape_text, sanitize

logger = get_logger(__name__)


MARKER_CLASS = "search-highlight"
ELLIPSIS = "..."

# A match only extends the truncation window if it ends within this
# multiple of max_length.
TRUNCATION_REACH = 2

OptionsLike = Union[HighlightOptions, Mapping, None]
BatchItem = Union[str, Tuple[str, Optional[str]]]


class Highlighter:
    """
    Highlights query terms inside arbitrary text.

    Terms are matched longest first so a phrase is wrapped before the
    words inside it; a span already claimed by an earlier term is never
    wrapped again.
    """

    def __init__(self, limits: HighlightLimits = None):
        """
        Initialize the highlighter.

        Args:
            limits: Work caps applied to every call. Defaults apply if omitted.
        """
        self.limits = limits or HighlightLimits()
        self.parser = QueryParser(
            max_query_length=self.limits.max_query_length,
            max_terms=self.limits.max_terms,
            min_term_length=self.limits.min_term_length
        )

    @classmethod
    def from_config(cls, config: Config) -> "Highlighter":
        """Build a highlighter whose limits come from the config file."""
        hl = config.highlighting
        return cls(HighlightLimits(
            max_text_length=hl.max_text_length,
            max_query_length=hl.max_query_length,
            max_terms=hl.max_terms,
            min_term_length=hl.min_term_length,
            trailing_context=hl.trailing_context
        ))

    def highlight(
        self,
        text: str,
        query: str,
        options: OptionsLike = None,
        matched_fields: Optional[Sequence[str]] = None
    ) -> HighlightResult:
        """
        Highlight occurrences of the query's terms in text.

        Args:
            text: Field text to highlight.
            query: Raw search query.
            options: HighlightOptions or a mapping of option names.
            matched_fields: Fields the upstream search matched; carried
                through to the result for display only.

        Returns:
            HighlightResult with sanitized markup. Never raises.
        """
        return self._safe_highlight(text, query, options, matched_fields)

    def batch_highlight(
        self,
        items: Iterable[BatchItem],
        query: str,
        options: OptionsLike = None
    ) -> List[HighlightResult]:
        """
        Highlight several texts against one query, parsing it only once.

        Args:
            items: Plain strings or (text, field_type) pairs. The field type
                is passed on as the matched-fields hint.
            query: Raw search query.
            options: Options applied to every item.

        Returns:
            One HighlightResult per item, in order.
        """
        query = ensure_text(query, "query")
        terms = self.parser.extract_terms(query) if query.strip() else []

        results = []
        for item in items:
            if isinstance(item, tuple):
                text, field_type = (tuple(item) + (None,))[:2]
            else:
                text, field_type = item, None
            hints = [str(field_type)] if field_type else None
            results.append(self._safe_highlight(text, query, options, hints, terms))

        return results

    def _safe_highlight(
        self,
        text: str,
        query: str,
        options: OptionsLike,
        matched_fields: Optional[Sequence[str]],
        terms: Optional[List[str]] = None
    ) -> HighlightResult:
        """Run a highlight call, degrading to escaped text on failure."""
        try:
            return self._highlight(text, query, options, matched_fields, terms)
        except Exception as e:
            logger.error(f"Highlighting failed, returning escaped text: {e}")
            plain = ensure_text(text, "text")
            return HighlightResult(
                html=sanitize(escape_text(plain)),
                performance=PerformanceStats(content_length=len(plain)),
                matched_fields=self._coerce_hints(matched_fields)
            )

    def _highlight(
        self,
        text: str,
        query: str,
        options: OptionsLike,
        matched_fields: Optional[Sequence[str]],
        terms: Optional[List[str]]
    ) -> HighlightResult:
        text = ensure_text(text, "text")
        query = ensure_text(query, "query")
        options = self._coerce_options(options)
        hints = self._coerce_hints(matched_fields)

        if not text:
            return HighlightResult(html=sanitize(""), matched_fields=hints)

        if not query.strip():
            terms = []
        elif terms is None:
            terms = self.parser.extract_terms(query)

        with PerformanceRecorder() as recorder:
            html, matches, truncated = self._apply(text, terms, options)
            html = sanitize(html)

        result = HighlightResult(
            html=html,
            matches=matches,
            truncated=truncated,
            performance=recorder.stats(term_count=len(terms), content_length=len(text)),
            matched_fields=hints
        )

        logger.debug(
            f"Highlighted {len(text)} chars for '{query}': terms={terms} "
            f"matches={result.total_matches} in {result.performance.execution_time_ms:.2f}ms"
        )
        return result

    def _apply(
        self,
        text: str,
        terms: List[str],
        options: HighlightOptions
    ) -> Tuple[str, Tuple[HighlightMatch, ...], bool]:
        """
        Match, truncate and wrap.

        Returns:
            (unsanitized markup, matches, truncated flag)
        """
        scanned = text[:self.limits.max_text_length]
        truncated = len(scanned) < len(text)
        elided = truncated

        ordered = sorted(
            (term for term in terms if len(term.strip()) >= self.limits.min_term_length),
            key=len,
            reverse=True
        )
        patterns = [(term, self._compile(term, options)) for term in ordered]

        counts = {term: sum(1 for _ in pattern.finditer(scanned)) for term, pattern in patterns}

        window = scanned
        max_length = options.max_length
        if max_length and max_length > 0 and len(scanned) > max_length:
            cut = self._truncation_point(scanned, patterns, max_length)
            window = scanned[:cut].rstrip()
            truncated = True
            elided = elided or cut < len(scanned)

        html = self._wrap(window, patterns, options)
        if elided and options.show_ellipsis:
            html += ELLIPSIS

        matches = tuple(
            HighlightMatch(term=term, count=counts[term])
            for term in terms
            if counts.get(term)
        )

        return html, matches, truncated

    def _truncation_point(
        self,
        text: str,
        patterns: List[Tuple[str, Pattern]],
        max_length: int
    ) -> int:
        """
        Choose where to cut text that is longer than max_length.

        If the earliest match ends within reach, the cut lands just past it
        plus the trailing context, snapped back to whitespace but never
        into the match. A match that ends the text keeps the whole text.
        Otherwise the text is cut at max_length, snapped back to whitespace.
        """
        first = None
        for _, pattern in patterns:
            match = pattern.search(text)
            if match and match.end() > match.start():
                if first is None or match.start() < first.start():
                    first = match

        if first is not None and first.end() <= max_length * TRUNCATION_REACH:
            if first.end() >= len(text):
                return len(text)
            limit = max(max_length, first.end() + self.limits.trailing_context)
            limit = min(limit, len(text) - 1)
            return snap_to_whitespace(text, limit, floor=first.end())

        return snap_to_whitespace(text, max_length)

    @staticmethod
    def _wrap(
        text: str,
        patterns: List[Tuple[str, Pattern]],
        options: HighlightOptions
    ) -> str:
        """Wrap non-overlapping occurrences, earlier patterns claiming first."""
        taken = bytearray(len(text))
        spans = []

        for index, (_, pattern) in enumerate(patterns):
            color = HighlightColor.for_index(index if options.multi_color else 0)
            css = f"{MARKER_CLASS} {color.css_class}"
            if options.style_hint:
                css += f" highlight-{options.style_hint}"

            for match in pattern.finditer(text):
                start, end = match.span()
                if start == end or 1 in taken[start:end]:
                    continue
                taken[start:end] = b"\x01" * (end - start)
                spans.append((start, end, css))

        spans.sort()

        parts = []
        pos = 0
        for start, end, css in spans:
            parts.append(escape_text(text[pos:start]))
            parts.append(f'<mark class="{css}">{escape_text(text[start:end])}</mark>')
            pos = end
        parts.append(escape_text(text[pos:]))

        return "".join(parts)

    @staticmethod
    def _compile(term: str, options: HighlightOptions) -> Pattern:
        """Build the search pattern for one term."""
        body = r"\s+".join(re.escape(part) for part in term.split())
        if options.whole_words:
            body = rf"(?<!\w){body}(?!\w)"
        flags = 0 if options.case_sensitive else re.IGNORECASE
        return re.compile(body, flags)

    @staticmethod
    def _coerce_options(options: OptionsLike) -> HighlightOptions:
        if options is None:
            return HighlightOptions()
        if isinstance(options, HighlightOptions):
            return options
        if isinstance(options, Mapping):
            return HighlightOptions().merged(**option_overrides(options))

        logger.warning(f"Ignoring options of type {type(options).__name__}")
        return HighlightOptions()

    @staticmethod
    def _coerce_hints(matched_fields: Optional[Sequence[str]]) -> Tuple[str, ...]:
        if not matched_fields:
            return ()
        if isinstance(matched_fields, str):
            return (matched_fields,)
        return tuple(str(name) for name in matched_fields)


def option_overrides(options: Mapping) -> Dict[str, Any]:
    """
    Copy an options mapping, dropping keys that cannot name an option.

    Unknown string keys are kept here and ignored by HighlightOptions.merged.
    """
    overrides = {}
    for key, value in options.items():
        if not isinstance(key, str):
            logger.warning(f"Ignoring option with non-string key {key!r}")
            continue
        overrides[key] = value
    return overrides


_default_highlighter = Highlighter()


def highlight_text(
    text: str,
    query: str,
    options: OptionsLike = None,
    matched_fields: Optional[Sequence[str]] = None
) -> HighlightResult:
    """Highlight text with the default limits. See Highlighter.highlight."""
    return _default_highlighter.highlight(text, query, options, matched_fields)


def batch_highlight(
    items: Iterable[BatchItem],
    query: str,
    options: OptionsLike = None
) -> List[HighlightResult]:
    """Highlight several texts with the default limits."""
    return _default_highlighter.batch_highlight(items, query, options)


if __name__ == "__main__":
    samples = [
        ("This is about machine learning", "machine", None),
        ("Machine learning with JavaScript", "machine javascript", None),
        ("Deep dive: machine learning in node.js", '"machine learning" node.js', None),
        (
            "This is a very long text that contains machine learning concepts and should be "
            "truncated intelligently based on search terms to preserve context.",
            "machine learning",
            HighlightOptions(max_length=50)
        ),
        ('Hello <script>alert("xss")</script> world', "hello", None),
        ("Hello world", "", None),
    ]

    for text, query, opts in samples:
        result = highlight_text(text, query, opts)
        print(f"'{query}':")
        print(f"  html: {result.html}")
        print(f"  matches: {[(m.term, m.count) for m in result.matches]} truncated={result.truncated}")
        print(f"  perf: {result.performance}")
