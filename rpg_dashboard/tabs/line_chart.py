"""
Average runs per game by year.

Draws the league-wide mean for the visible seasons and, when a team is
highlighted, that team's own yearly mean on top of it.
"""
from __future__ import annotations

import logging
from typing import Optional

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from rpg_dashboard.data.aggregation import aggregate_mean_by_year
from rpg_dashboard.shared.chart_themes import (
    HIGHLIGHT_COLOR,
    LEAGUE_AVG_COLOR,
    empty_chart_layout,
    get_base_layout,
    nice_domain,
)
from rpg_dashboard.shared.components import render_chart_title, render_year_label
from rpg_dashboard.shared.dataframe_utils import require_columns
from rpg_dashboard.shared.tooltip import HOVER_LABEL, LEAGUE_AVG_HOVER_TEMPLATE, team_hover_template
from rpg_dashboard.state import DashboardController
from rpg_dashboard.utils.exceptions import handle_chart_errors
from rpg_dashboard.utils.performance import log_performance

logger = logging.getLogger(__name__)

LINE_WIDTH = 2
MARKER_SIZE = 6
REVEAL_DURATION_MS = 750

SLIDER_KEY = "line_years"


def _year_range(years: pd.Series) -> list:
    lo, hi = int(years.min()), int(years.max())
    if lo == hi:
        return [lo - 1, hi + 1]
    return [lo, hi]


@log_performance("build_line_figure")
def build_line_figure(
    records: pd.DataFrame,
    highlight_team: Optional[str] = None,
    theme: Optional[str] = None,
) -> go.Figure:
    """
    Build the line chart from scratch.

    Args:
        records: Visible team seasons
        highlight_team: Team name to add as a second series, or None
        theme: 'light' or 'dark'. If None, auto-detects.

    Returns:
        A new Plotly figure
    """
    require_columns(records, ["yearID", "name", "runsPerGame"], "Line chart")

    league_series = aggregate_mean_by_year(records)
    series = [league_series]

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=league_series["year"].tolist(),
            y=league_series["value"].tolist(),
            mode="lines+markers",
            name="League Avg",
            line=dict(width=LINE_WIDTH, color=LEAGUE_AVG_COLOR),
            marker=dict(size=MARKER_SIZE, color=LEAGUE_AVG_COLOR),
            hovertemplate=LEAGUE_AVG_HOVER_TEMPLATE,
            hoverlabel=HOVER_LABEL,
        )
    )

    if highlight_team:
        team_series = aggregate_mean_by_year(records[records["name"] == highlight_team])
        series.append(team_series)
        fig.add_trace(
            go.Scatter(
                x=team_series["year"].tolist(),
                y=team_series["value"].tolist(),
                mode="lines+markers",
                name=highlight_team,
                line=dict(width=LINE_WIDTH, color=HIGHLIGHT_COLOR),
                marker=dict(size=MARKER_SIZE, color=HIGHLIGHT_COLOR),
                hovertemplate=team_hover_template(highlight_team),
                hoverlabel=HOVER_LABEL,
            )
        )

    layout = get_base_layout(theme=theme)
    layout["xaxis"].update(title=dict(text="Year"), tickformat="d")
    layout["yaxis"]["title"] = dict(text="Avg Runs per Game")
    layout["transition"] = dict(duration=REVEAL_DURATION_MS, easing="cubic-in-out")

    drawn = [s for s in series if not s.empty]
    if not drawn:
        empty = empty_chart_layout()
        layout["xaxis"].update(empty["xaxis"])
        layout["yaxis"].update(empty["yaxis"])
        layout["annotations"] = empty["annotations"]
    else:
        points = pd.concat(drawn, ignore_index=True)
        layout["xaxis"]["range"] = _year_range(points["year"])
        layout["yaxis"]["range"] = list(nice_domain(float(points["value"].min()), float(points["value"].max())))

    fig.update_layout(**layout)
    return fig


@handle_chart_errors("Line chart")
def render_line(records: pd.DataFrame, highlight_team: Optional[str] = None) -> None:
    """Clear and redraw the line chart."""
    fig = build_line_figure(records, highlight_team)
    st.plotly_chart(fig, use_container_width=True, key="linechart")


def _on_line_years(controller: DashboardController) -> None:
    lo, hi = st.session_state[SLIDER_KEY]
    controller.set_line_year_range(lo, hi)


@st.fragment
def display_line_section(controller: DashboardController) -> None:
    """Line chart with its own year-range slider; the slider reruns only this section."""
    render_chart_title(
        "Average Runs per Game by Year",
        "League-wide mean per season. Pick a team to compare it against the league.",
    )

    lo, hi = controller.year_bounds
    if lo < hi:
        st.slider(
            "Line chart years",
            min_value=lo,
            max_value=hi,
            value=(lo, hi),
            step=1,
            key=SLIDER_KEY,
            on_change=_on_line_years,
            args=(controller,),
        )
    render_year_label(controller.state.line_years)

    records = controller.line_records()
    logger.debug(f"Drawing line chart with {len(records)} seasons")
    render_line(records, controller.highlight_team)
