"""
Streamlit preview application for the highlighting engine.

Highlights a sample article against a query using the field profiles,
so colour slots, truncation and sanitization can be checked by eye.

Note: This file is run directly by Streamlit, so it needs to
set up the Python path before importing other modules.
"""

import sys
from pathlib import Path

# Add project root to path for imports when run directly by Streamlit
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st  # noqa: E402

from search_highlighting.core import ConfigurationError, QueryParseError, get_config, get_logger  # noqa: E402
from search_highlighting.highlight import Highlighter, highlight_article_fields  # noqa: E402

from search_highlighting.gui.state import init_state  # noqa: E402
from search_highlighting.gui.components import (  # noqa: E402
    render_sidebar,
    render_search_bar,
    render_query_analysis,
    render_highlighted_article,
    render_palette_styles,
)

logger = get_logger(__name__)


def main():
    """Main application entry point."""
    try:
        config = get_config()
        page_title = config.gui.page_title
        show_performance = config.gui.show_performance
        first_field = config.gui.default_field
        highlighter = Highlighter.from_config(config)
    except ConfigurationError as e:
        logger.warning(f"Using default settings: {e.message}")
        page_title = "Search Highlighting Preview"
        show_performance = True
        first_field = "content"
        highlighter = Highlighter()

    st.set_page_config(
        page_title=page_title,
        layout="wide",
        initial_sidebar_state="expanded"
    )

    init_state()

    render_palette_styles()

    options = render_sidebar()

    st.title(page_title)

    query, article = render_search_bar()

    try:
        parsed = highlighter.parser.validate(query)
    except QueryParseError as e:
        st.warning(f"{e.message}. The query is highlighted leniently.")
        parsed = highlighter.parser.parse(query)
    render_query_analysis(parsed)

    st.divider()

    highlighted = highlight_article_fields(article, query, options, highlighter)
    render_highlighted_article(highlighted, show_performance, first_field)

    logger.debug(f"Rendered preview for '{query}' ({parsed.query_type.value})")


if __name__ == "__main__":
    main()
