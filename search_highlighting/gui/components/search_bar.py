"""
Query input and article editor for the highlighting preview.

Provides the query field, editable sample article fields and a summary
of how the query was parsed.
"""

import streamlit as st
from typing import Tuple

from ...search import ArticleSearchResult, ParsedQuery, extract_terms_from_query
from ..state import get_preview_article, get_state, set_state


def render_search_bar() -> Tuple[str, ArticleSearchResult]:
    """
    Render the query input and the sample article editor.

    Returns:
        Tuple of (query_text, article).
    """
    query = st.text_input(
        "Query",
        value=get_state("search_query", ""),
        placeholder='machine learning, "exact phrase", node.js AND react...',
        key="search_input"
    )
    set_state("search_query", query)

    with st.expander("Article", expanded=False):
        title = st.text_input("Title", value=get_state("article_title", ""))
        author = st.text_input("Author", value=get_state("article_author", ""))
        tags = st.text_input("Tags (comma separated)", value=get_state("article_tags", ""))
        content = st.text_area("Content", value=get_state("article_content", ""), height=150)

    set_state("article_title", title)
    set_state("article_author", author)
    set_state("article_tags", tags)
    set_state("article_content", content)

    return query, get_preview_article()


def render_query_analysis(parsed: ParsedQuery) -> None:
    """
    Render how the query was classified.

    Args:
        parsed: Result of parse_search_query for the current query.
    """
    if parsed.is_empty:
        return

    col1, col2, col3 = st.columns([1, 1, 3])

    with col1:
        st.metric("Type", parsed.query_type.value)

    with col2:
        st.metric("Words", parsed.word_count)

    with col3:
        terms = extract_terms_from_query(parsed.original_query, parsed)
        st.caption("Terms: " + ", ".join(f"`{term}`" for term in terms))
        if parsed.detected_operators:
            st.caption("Operators: " + " ".join(parsed.detected_operators))
        st.caption(f"Normalized: `{parsed.normalized_query}`")
