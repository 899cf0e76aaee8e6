"""
Runs per game vs wins scatter plot.

Every point is one team season, coloured by league. The axes follow the
visible subset, so zooming the year range rescales the chart. The legend
always lists every league in the dataset, plus the highlighted team when one
is selected.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from rpg_dashboard.shared.chart_themes import (
    HIGHLIGHT_OUTLINE,
    empty_chart_layout,
    get_base_layout,
    nice_domain,
)
from rpg_dashboard.shared.components import render_chart_title, render_year_label
from rpg_dashboard.shared.dataframe_utils import require_columns
from rpg_dashboard.shared.tooltip import HOVER_LABEL, SCATTER_HOVER_FIELDS, SCATTER_HOVER_TEMPLATE
from rpg_dashboard.state import DashboardController
from rpg_dashboard.utils.exceptions import handle_chart_errors
from rpg_dashboard.utils.performance import log_performance

logger = logging.getLogger(__name__)

BASE_SIZE = 8
HIGHLIGHT_SIZE = 14
HIGHLIGHT_LINE_WIDTH = 1.5
POINT_OPACITY = 0.8

SLIDER_KEY = "scatter_years"


@log_performance("build_scatter_figure")
def build_scatter_figure(
    records: pd.DataFrame,
    color_assignment: Dict[str, str],
    highlight_team: Optional[str] = None,
    theme: Optional[str] = None,
) -> go.Figure:
    """
    Build the scatter figure from scratch.

    Args:
        records: Visible team seasons
        color_assignment: League -> colour, built from the full dataset
        highlight_team: Team name to emphasise, or None
        theme: 'light' or 'dark'. If None, auto-detects.

    Returns:
        A new Plotly figure; the same inputs always give the same figure
    """
    require_columns(records, SCATTER_HOVER_FIELDS, "Scatter plot")

    fig = go.Figure()

    for league, color in color_assignment.items():
        subset = records[records["lgID"] == league]
        if highlight_team:
            is_team = (subset["name"] == highlight_team).tolist()
        else:
            is_team = [False] * len(subset)

        fig.add_trace(
            go.Scatter(
                x=subset["runsPerGame"].tolist(),
                y=subset["W"].tolist(),
                mode="markers",
                name=league,
                legendgroup=league,
                marker=dict(
                    color=color,
                    opacity=POINT_OPACITY,
                    size=[HIGHLIGHT_SIZE if hit else BASE_SIZE for hit in is_team],
                    line=dict(
                        color=HIGHLIGHT_OUTLINE,
                        width=[HIGHLIGHT_LINE_WIDTH if hit else 0 for hit in is_team],
                    ),
                ),
                customdata=subset[SCATTER_HOVER_FIELDS].values.tolist(),
                hovertemplate=SCATTER_HOVER_TEMPLATE,
                hoverlabel=HOVER_LABEL,
            )
        )

    if highlight_team:
        # Legend entry only
        fig.add_trace(
            go.Scatter(
                x=[None],
                y=[None],
                mode="markers",
                name=highlight_team,
                marker=dict(
                    size=HIGHLIGHT_SIZE,
                    color="rgba(0, 0, 0, 0)",
                    line=dict(color=HIGHLIGHT_OUTLINE, width=HIGHLIGHT_LINE_WIDTH),
                ),
                hoverinfo="skip",
            )
        )

    layout = get_base_layout(theme=theme)
    layout["legend"]["title"] = dict(text="League")
    layout["xaxis"]["title"] = dict(text="Runs per Game")
    layout["yaxis"]["title"] = dict(text="Wins")

    if records.empty:
        empty = empty_chart_layout()
        layout["xaxis"].update(empty["xaxis"])
        layout["yaxis"].update(empty["yaxis"])
        layout["annotations"] = empty["annotations"]
    else:
        rpg, wins = records["runsPerGame"], records["W"]
        layout["xaxis"]["range"] = list(nice_domain(float(rpg.min()), float(rpg.max())))
        layout["yaxis"]["range"] = list(nice_domain(float(wins.min()), float(wins.max())))

    fig.update_layout(**layout)
    return fig


@handle_chart_errors("Scatter plot")
def render_scatter(
    records: pd.DataFrame,
    color_assignment: Dict[str, str],
    highlight_team: Optional[str] = None,
) -> None:
    """Clear and redraw the scatter plot."""
    fig = build_scatter_figure(records, color_assignment, highlight_team)
    st.plotly_chart(fig, use_container_width=True, key="scatterplot")


def _on_scatter_years(controller: DashboardController) -> None:
    lo, hi = st.session_state[SLIDER_KEY]
    controller.set_scatter_year_range(lo, hi)


@st.fragment
def display_scatter_section(controller: DashboardController) -> None:
    """Scatter plot with its own year-range slider; the slider reruns only this section."""
    render_chart_title(
        "Runs per Game vs Wins",
        "Each point is one team season. Hover for details.",
    )

    lo, hi = controller.year_bounds
    if lo < hi:
        st.slider(
            "Scatter years",
            min_value=lo,
            max_value=hi,
            value=(lo, hi),
            step=1,
            key=SLIDER_KEY,
            on_change=_on_scatter_years,
            args=(controller,),
        )
    render_year_label(controller.state.scatter_years)

    records = controller.scatter_records()
    logger.debug(f"Drawing scatter with {len(records)} seasons")
    render_scatter(records, controller.color_assignment, controller.highlight_team)
