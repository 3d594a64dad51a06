"""
Highlighted result display for the preview application.

The markup handed to ``unsafe_allow_html`` always comes from a
HighlightResult, whose html has already passed the sanitizer.
"""

import streamlit as st
from typing import Dict, List, Union

from ...highlight import HighlightColor, HighlightResult

FIELD_LABELS = {
    "title": "Title",
    "author": "Author",
    "content": "Content",
    "tags": "Tags"
}


def render_palette_styles() -> None:
    """Inject CSS for the highlight colour slots and style hints."""
    rules = [
        f".search-highlight.{color.css_class} "
        f"{{ background-color: {color.background}; color: {color.text_color}; }}"
        for color in HighlightColor
    ]
    rules.append(".search-highlight { font-weight: 600; padding: 0 0.15rem; border-radius: 0.2rem; }")
    rules.append(".search-highlight.highlight-emphasis { font-weight: 700; }")
    rules.append(".search-highlight.highlight-pill { border-radius: 999px; padding: 0 0.4rem; }")
    st.markdown(f"<style>{' '.join(rules)}</style>", unsafe_allow_html=True)


def render_highlighted_article(
    highlighted: Dict[str, Union[HighlightResult, List[HighlightResult]]],
    show_performance: bool = True,
    first_field: str = "title"
) -> None:
    """
    Render every highlighted field of an article.

    Args:
        highlighted: Output of highlight_article_fields.
        show_performance: Show timing and term counters per field.
        first_field: Field rendered before the others.
    """
    order = [first_field] + [name for name in FIELD_LABELS if name != first_field]
    for name in order:
        value = highlighted.get(name)
        if value is None:
            continue

        st.markdown(f"**{FIELD_LABELS[name]}**")

        results = value if isinstance(value, list) else [value]
        if not results:
            st.caption("(empty)")
            continue

        html = " &middot; ".join(str(result.html) for result in results)
        st.markdown(html, unsafe_allow_html=True)

        _render_counters(results, show_performance)


def _render_counters(results: List[HighlightResult], show_performance: bool) -> None:
    """Render match count and performance badges for a field."""
    total = sum(result.total_matches for result in results)
    parts = [f"{total} match{'es' if total != 1 else ''}"]

    if show_performance:
        elapsed = sum(result.performance.execution_time_ms for result in results)
        terms = max(result.performance.term_count for result in results)
        parts.append(f"{elapsed:.2f}ms")
        parts.append(f"{terms} terms")

    if any(result.truncated for result in results):
        parts.append("truncated")

    st.caption(" | ".join(parts))
