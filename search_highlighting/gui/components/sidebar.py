"""
Sidebar component for the highlighting preview.

Lets the user override highlighting options on top of the field profiles.
"""

import streamlit as st
from typing import Dict

from ...highlight import FIELD_PROFILES, FieldType
from ..state import reset_sample_article, set_state


def render_sidebar() -> Dict:
    """
    Render the sidebar with highlighting options.

    Returns:
        Mapping of option overrides chosen by the user. Only options the
        user changed are included, so field profiles still apply.
    """
    with st.sidebar:
        st.title("Highlighting")

        st.subheader("Options")
        overrides = _render_options()

        st.divider()

        st.subheader("Field profiles")
        _render_profiles()

        st.divider()

        _render_help()

        st.button("Reset sample article", on_click=reset_sample_article, use_container_width=True)

    set_state("highlight_options", overrides)
    return overrides


def _render_options() -> Dict:
    """Render option controls and collect overrides."""
    overrides = {}

    if st.checkbox("Case sensitive", value=False):
        overrides["case_sensitive"] = True

    if not st.checkbox("Whole words only", value=True):
        overrides["whole_words"] = False

    if not st.checkbox("Show ellipsis", value=True):
        overrides["show_ellipsis"] = False

    if st.checkbox("Override max length", value=False):
        overrides["max_length"] = st.slider(
            "Max length",
            min_value=10,
            max_value=500,
            value=120,
            step=10
        )

    return overrides


def _render_profiles() -> None:
    """Show the fixed per-field option profiles."""
    for field_type in FieldType:
        profile = FIELD_PROFILES[field_type]
        st.caption(
            f"**{field_type.value}**: max {profile.max_length}, "
            f"{'multi-colour' if profile.multi_color else 'single colour'}"
            f"{', ' + profile.style_hint if profile.style_hint else ''}"
        )


def _render_help() -> None:
    """Render query syntax help."""
    with st.expander("Query syntax"):
        st.markdown("""
        - `machine learning` matches each word
        - `"machine learning"` matches the phrase, then each word
        - `AND` / `OR` in upper case are operators
        - `node.js` stays a single term
        """)
