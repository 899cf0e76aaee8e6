"""
Reusable UI components for consistent design across the dashboard
"""

from typing import Optional

import streamlit as st


def render_header(title: str, subtitle: Optional[str] = None):
    """
    Render the page header card
    """
    subtitle_html = (
        f"""
        <p style="margin: 0; color: var(--text-secondary, #6B7280); font-size: 0.85rem;">
            {subtitle}
        </p>
    """
        if subtitle
        else ""
    )

    st.markdown(
        f"""
        <div style="
            background: linear-gradient(135deg, rgba(78, 121, 167, 0.10) 0%, rgba(242, 142, 44, 0.06) 100%);
            border: 1px solid rgba(128, 128, 128, 0.2);
            border-radius: 8px;
            padding: 1rem;
            margin-bottom: 1rem;
        ">
            <h2 style="margin: 0 0 0.5rem 0; font-size: 1.25rem; font-weight: 600;">
                {title}
            </h2>
            {subtitle_html}
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_chart_title(title: str, subtitle: str) -> None:
    """Render a chart title with subtitle."""
    st.markdown(
        f"""
        <div style="margin-bottom: 0.75rem;">
            <h3 style="margin: 0; font-size: 1.1rem; font-weight: 600;">
                {title}
            </h3>
            <p style="margin: 0.25rem 0 0 0; font-size: 0.8rem; color: #6B7280;">
                {subtitle}
            </p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_year_label(years) -> None:
    """Echo the selected year bounds under a slider."""
    lo, hi = years
    st.caption(f"{lo} – {hi}")
