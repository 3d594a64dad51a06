"""
Streamlit session state for the preview application.

Holds the query, the editable sample article and the option overrides
chosen in the sidebar, and converts the article fields back into an
ArticleSearchResult for highlighting.
"""

import streamlit as st
from typing import Any, List

from ..search import ArticleSearchResult, build_search_context


SAMPLE_ARTICLE = {
    "article_title": "Machine Learning in Modern JavaScript Applications",
    "article_author": "John Doe",
    "article_tags": "JavaScript, Machine Learning, AI",
    "article_content": (
        "This article explores the integration of machine learning algorithms into "
        "JavaScript applications. Libraries such as TensorFlow.js and brain.js make it "
        "possible to train and run models directly in the browser or on node.js servers."
    ),
}

DEFAULT_STATE = {
    "search_query": "machine learning",
    "highlight_options": {},
    **SAMPLE_ARTICLE,
}


def init_state() -> None:
    """
    Initialize session state with default values.

    Only sets values that don't already exist, preserving
    state across reruns.
    """
    for key, default_value in DEFAULT_STATE.items():
        if key not in st.session_state:
            st.session_state[key] = default_value


def get_state(key: str, default: Any = None) -> Any:
    """Get a value from session state."""
    return st.session_state.get(key, default)


def set_state(key: str, value: Any) -> None:
    """Set a value in session state."""
    st.session_state[key] = value


def split_tags(raw: str) -> List[str]:
    """Split a comma separated tag string, dropping blanks."""
    return [tag.strip() for tag in (raw or "").split(",") if tag.strip()]


def reset_sample_article() -> None:
    """Restore the sample article fields, keeping the query and options."""
    for key, value in SAMPLE_ARTICLE.items():
        st.session_state[key] = value


def get_preview_article() -> ArticleSearchResult:
    """
    Build the article being previewed from session state.

    Returns:
        ArticleSearchResult carrying the edited fields and a search
        context for the current query.
    """
    query = get_state("search_query", "")
    return ArticleSearchResult(
        id="preview",
        title=get_state("article_title", ""),
        content=get_state("article_content", ""),
        author=get_state("article_author", ""),
        tags=split_tags(get_state("article_tags", "")),
        search_context=build_search_context(query)
    )
