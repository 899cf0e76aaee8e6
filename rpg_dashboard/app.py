#!/usr/bin/env python3
"""
Runs per Game Dashboard

Entry point: ``streamlit run rpg_dashboard/app.py``

- Loads the team-season CSV once (cached per path)
- Keeps one DashboardController per session in st.session_state
- League/team selectors rerun the whole page; each chart's year slider
  reruns only its own fragment
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure the project root is importable when run via `streamlit run`
project_root = Path(__file__).parent.parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st

from rpg_dashboard.config import get_data_path, get_log_level
from rpg_dashboard.data.loader import load_teams_cached
from rpg_dashboard.shared.components import render_header
from rpg_dashboard.state import ALL, DashboardController
from rpg_dashboard.tabs.line_chart import SLIDER_KEY as LINE_SLIDER_KEY, display_line_section
from rpg_dashboard.tabs.scatter_chart import SLIDER_KEY as SCATTER_SLIDER_KEY, display_scatter_section
from rpg_dashboard.utils.exceptions import DatasetLoadError
from rpg_dashboard.utils.performance import perf_monitor

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

CONTROLLER_KEY = "dashboard_controller"
LEAGUE_KEY = "league_filter"
TEAM_KEY = "team_filter"
WIDGET_KEYS = [LEAGUE_KEY, TEAM_KEY, SCATTER_SLIDER_KEY, LINE_SLIDER_KEY]


def _log_redraw(views) -> None:
    logger.info(f"Redrawing {', '.join(sorted(views))}")


def _get_controller(data, source: str) -> DashboardController:
    """Session controller, rebuilt only when the dataset path changes."""
    controller = st.session_state.get(CONTROLLER_KEY)
    if controller is None or st.session_state.get(f"{CONTROLLER_KEY}_source") != source:
        # Widgets start over from the new dataset's defaults
        for key in WIDGET_KEYS:
            st.session_state.pop(key, None)
        controller = DashboardController(data)
        controller.subscribe(_log_redraw)
        st.session_state[CONTROLLER_KEY] = controller
        st.session_state[f"{CONTROLLER_KEY}_source"] = source
        logger.info(f"New dashboard session: {len(controller.leagues)} leagues, "
                    f"years {controller.min_year}-{controller.max_year}")
    return controller


def _on_league_change(controller: DashboardController) -> None:
    controller.set_league(st.session_state[LEAGUE_KEY])
    # The team list was rebuilt for the new league
    st.session_state[TEAM_KEY] = ALL


def _on_team_change(controller: DashboardController) -> None:
    controller.set_team(st.session_state[TEAM_KEY])


def render_filters(controller: DashboardController) -> None:
    """League and team selectors shared by both charts."""
    col1, col2 = st.columns(2)

    with col1:
        st.selectbox(
            "League",
            options=[ALL] + controller.leagues,
            key=LEAGUE_KEY,
            on_change=_on_league_change,
            args=(controller,),
        )

    with col2:
        st.selectbox(
            "Team",
            options=[ALL] + controller.team_options,
            key=TEAM_KEY,
            on_change=_on_team_change,
            args=(controller,),
            help="Highlight one team in both charts",
        )


def main():
    """Main application entry point"""
    try:
        st.set_page_config(
            page_title="Runs per Game Dashboard",
            layout="wide",
            page_icon="⚾",
        )
    except st.errors.StreamlitAPIException:
        pass

    render_header(
        "Runs per Game",
        "Team offence since 1960: how scoring relates to winning, and how the league average has moved.",
    )

    source = str(get_data_path())
    try:
        with st.spinner("Loading team data..."), perf_monitor.time_operation("load_teams_cached"):
            data = load_teams_cached(source)
    except DatasetLoadError as e:
        logger.error(f"Dataset load failed: {e}", exc_info=True)
        st.error(f"❌ Could not load team data: {e}")
        st.info("Set TEAMS_CSV (environment or Streamlit secrets) to the path of Teams.csv.")
        st.stop()

    controller = _get_controller(data, source)

    render_filters(controller)

    col1, col2 = st.columns(2)
    with col1:
        display_scatter_section(controller)
    with col2:
        display_line_section(controller)


if __name__ == "__main__":
    main()
