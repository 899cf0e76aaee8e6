"""
Plotly chart theming shared by the scatter and line charts.

Provides:
- League colour palette and the league -> colour assignment
- Light/dark template detection from Streamlit's theme option
- Base layout used by every figure
- d3-style "nice" axis bounds

Usage:
    from rpg_dashboard.shared.chart_themes import get_base_layout, nice_domain

    fig.update_layout(**get_base_layout())
    fig.update_xaxes(range=list(nice_domain(2.9, 5.7)))
"""

import math
from typing import Dict, Iterable, Optional, Tuple

import streamlit as st


# ============================================
# COLOR PALETTES
# ============================================

# Tableau 10, ordered as d3.schemeTableau10
LEAGUE_COLORS = [
    '#4e79a7',  # Blue
    '#f28e2c',  # Orange
    '#e15759',  # Red
    '#76b7b2',  # Teal
    '#59a14f',  # Green
    '#edc949',  # Yellow
    '#af7aa1',  # Purple
    '#ff9da7',  # Pink
    '#9c755f',  # Brown
    '#bab0ab',  # Grey
]

LEAGUE_AVG_COLOR = '#1f77b4'
HIGHLIGHT_COLOR = '#ff7f0e'
HIGHLIGHT_OUTLINE = '#222222'


def build_color_assignment(leagues: Iterable[str]) -> Dict[str, str]:
    """
    Map each league to a stable colour.

    Leagues are sorted first so the same dataset always yields the same
    mapping, no matter which subset is on screen.
    """
    ordered = sorted({str(lg) for lg in leagues})
    return {lg: LEAGUE_COLORS[i % len(LEAGUE_COLORS)] for i, lg in enumerate(ordered)}


# ============================================
# THEME CONFIGURATIONS
# ============================================

def detect_theme() -> str:
    """Return 'dark' or 'light' based on Streamlit's theme.base option."""
    try:
        theme_base = st.get_option("theme.base")
    except Exception:
        theme_base = None
    return 'dark' if theme_base == 'dark' else 'light'


def get_plotly_template(theme: Optional[str] = None) -> str:
    """
    Get the appropriate Plotly template name for the theme.

    Args:
        theme: 'light' or 'dark'. If None, auto-detects.

    Returns:
        Plotly template name string
    """
    if theme is None:
        theme = detect_theme()

    return 'plotly_dark' if theme == 'dark' else 'plotly_white'


def get_base_layout(height: int = 450, theme: Optional[str] = None) -> dict:
    """Get standardized chart layout."""
    return {
        "height": height,
        "template": get_plotly_template(theme),
        "hovermode": "closest",
        "showlegend": True,
        "legend": dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            xanchor="right",
            x=1,
            font=dict(size=11),
        ),
        "margin": dict(l=60, r=30, t=30, b=50),
        "xaxis": dict(
            gridcolor="rgba(128, 128, 128, 0.1)",
            gridwidth=1,
            showgrid=True,
        ),
        "yaxis": dict(
            gridcolor="rgba(128, 128, 128, 0.1)",
            gridwidth=1,
            showgrid=True,
        ),
        "font": dict(family="system-ui, -apple-system, sans-serif"),
    }


def empty_chart_layout(message: str = "No seasons in range") -> dict:
    """Layout overrides for a figure with nothing to draw."""
    return {
        "xaxis": dict(visible=False),
        "yaxis": dict(visible=False),
        "annotations": [
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(size=14, color="#888888"),
            )
        ],
    }


# ============================================
# AXIS BOUNDS
# ============================================

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def _tick_increment(start: float, stop: float, count: int) -> float:
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / math.pow(10, power)
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    if power >= 0:
        return factor * math.pow(10, power)
    # negative increments encode 1 / step to keep decimals exact
    return -math.pow(10, -power) / factor


def nice_domain(lo: float, hi: float, count: int = 10) -> Tuple[float, float]:
    """
    Extend ``[lo, hi]`` outward to round tick values, like d3's scale.nice().

    A zero-width domain is widened by one unit either side so a single value
    still gets a drawable axis.
    """
    if lo > hi:
        lo, hi = hi, lo
    if lo == hi:
        return lo - 1, hi + 1

    prestep = None
    for _ in range(10):
        step = _tick_increment(lo, hi, count)
        if step == prestep:
            break
        if step > 0:
            lo = math.floor(lo / step) * step
            hi = math.ceil(hi / step) * step
        elif step < 0:
            lo = math.ceil(lo * step) / step
            hi = math.floor(hi * step) / step
        else:
            break
        prestep = step

    return round(lo, 12), round(hi, 12)
