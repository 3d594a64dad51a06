"""
Data models for highlighting.

Defines the per-call options, the fixed colour palette, field types and
the result records returned by the highlighter.
"""

from dataclasses import asdict, dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class FieldType(str, Enum):
    """Semantic role of the text being highlighted."""
    TITLE = "title"
    CONTENT = "content"
    AUTHOR = "author"
    TAGS = "tags"


class HighlightColor(Enum):
    """
    Closed palette of highlight colour slots.

    Each value is a (background, text) pair of hex colours. Terms are
    assigned slots by their position in the sorted term list, cycling
    through the members in definition order.
    """
    PRIMARY = ("#fef3c7", "#92400e")
    SECONDARY = ("#dbeafe", "#1e40af")
    ACCENT = ("#fed7d7", "#b91c1c")
    SUCCESS = ("#d1fae5", "#065f46")
    WARNING = ("#fde68a", "#78350f")
    INFO = ("#e0e7ff", "#3730a3")
    NEUTRAL = ("#f3f4f6", "#374151")
    PURPLE = ("#f3e8ff", "#6b21a8")
    PINK = ("#fce7f3", "#be185d")
    ORANGE = ("#fed7aa", "#c2410c")

    @property
    def background(self) -> str:
        return self.value[0]

    @property
    def text_color(self) -> str:
        return self.value[1]

    @property
    def css_class(self) -> str:
        """Class name carried by markers using this slot."""
        return f"highlight-{self.name.lower()}"

    @classmethod
    def for_index(cls, index: int) -> "HighlightColor":
        """Slot for the term at ``index`` in the sorted term list."""
        palette = list(cls)
        return palette[index % len(palette)]


@dataclass(frozen=True)
class HighlightOptions:
    """
    Explicit per-call highlighting options.

    Attributes:
        max_length: Truncate text longer than this many characters.
            None disables truncation.
        case_sensitive: Match terms with exact case.
        show_ellipsis: Append "..." when text was truncated.
        whole_words: Only match terms bounded by non-word characters.
        multi_color: Cycle colour slots per term; False pins every term
            to the primary slot.
        style_hint: Extra marker class suffix (e.g. "emphasis", "pill").
    """
    max_length: Optional[int] = None
    case_sensitive: bool = False
    show_ellipsis: bool = True
    whole_words: bool = True
    multi_color: bool = True
    style_hint: Optional[str] = None

    def merged(self, **overrides: Any) -> "HighlightOptions":
        """Return a copy with the given fields replaced."""
        known = {f.name for f in fields(self)}
        return replace(self, **{k: v for k, v in overrides.items() if k in known})


@dataclass(frozen=True)
class HighlightLimits:
    """
    Per-engine bounds on work done in a single call.

    Attributes:
        max_text_length: Characters of input text scanned at most.
        max_query_length: Characters of query parsed at most.
        max_terms: Terms extracted from a query at most.
        min_term_length: Terms shorter than this are never highlighted.
        trailing_context: Characters kept after the first match when
            truncating around it.
    """
    max_text_length: int = 100_000
    max_query_length: int = 500
    max_terms: int = 32
    min_term_length: int = 2
    trailing_context: int = 30


@dataclass(frozen=True)
class HighlightMatch:
    """Occurrence count of one term in the untruncated text."""
    term: str
    count: int = 0


@dataclass(frozen=True)
class PerformanceStats:
    """
    Counters recorded for one highlighting call.

    Attributes:
        execution_time_ms: Elapsed time of the matching phase.
        term_count: Number of distinct terms processed.
        content_length: Length of the original, untruncated text.
    """
    execution_time_ms: float = 0.0
    term_count: int = 0
    content_length: int = 0


@dataclass(frozen=True)
class HighlightResult:
    """
    Output of a highlighting call.

    Attributes:
        html: Sanitized markup, safe to render as trusted HTML.
        matches: One entry per term that occurred in the text.
        truncated: Whether the text was shortened.
        performance: Timing and size counters.
        matched_fields: Display hint passed through from the caller.
    """
    html: str = ""
    matches: Tuple[HighlightMatch, ...] = ()
    truncated: bool = False
    performance: PerformanceStats = field(default_factory=PerformanceStats)
    matched_fields: Tuple[str, ...] = ()

    @property
    def total_matches(self) -> int:
        """Sum of occurrence counts over all terms."""
        return sum(match.count for match in self.matches)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase shape consumed by rendering code."""
        return {
            "html": str(self.html),
            "matches": [asdict(match) for match in self.matches],
            "truncated": self.truncated,
            "performance": {
                "executionTime": self.performance.execution_time_ms,
                "termCount": self.performance.term_count,
                "contentLength": self.performance.content_length
            }
        }


if __name__ == "__main__":
    for index in range(12):
        color = HighlightColor.for_index(index)
        print(f"  term {index:2d} -> {color.css_class} ({color.background})")

    options = HighlightOptions(max_length=100)
    print(f"\nOptions: {options}")
    print(f"Merged: {options.merged(case_sensitive=True, unknown=1)}")

    result = HighlightResult(
        html='<mark class="search-highlight highlight-primary">machine</mark> learning',
        matches=(HighlightMatch("machine", 1),),
        performance=PerformanceStats(0.12, 1, 16)
    )
    print(f"\nResult: {result.to_dict()}")
