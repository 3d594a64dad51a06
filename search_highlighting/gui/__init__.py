"""
GUI module providing the Streamlit preview interface.

Renders highlighting results for a sample article so field profiles,
colour slots and truncation can be inspected in the browser.
"""

from .state import (
    init_state,
    get_state,
    set_state,
    split_tags,
    reset_sample_article,
    get_preview_article
)

__all__ = [
    "init_state",
    "get_state",
    "set_state",
    "split_tags",
    "reset_sample_article",
    "get_preview_article"
]
