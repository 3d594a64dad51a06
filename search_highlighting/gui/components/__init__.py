"""
Reusable UI components for the Streamlit preview application.

Contains the sidebar with highlighting options, the query and article
editor, and the highlighted result display.
"""

from .sidebar import render_sidebar
from .search_bar import render_search_bar, render_query_analysis
from .results_list import render_highlighted_article, render_palette_styles

__all__ = [
    "render_sidebar",
    "render_search_bar",
    "render_query_analysis",
    "render_highlighted_article",
    "render_palette_styles"
]
