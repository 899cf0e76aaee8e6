"""
Filter state and the controller that owns it.

One ``DashboardController`` exists per session. Widgets never touch the
filter values directly: every change goes through a setter, which clamps or
validates the value, commits it, and tells subscribers which charts need to
be redrawn.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, FrozenSet, List, Optional, Tuple

import pandas as pd

from rpg_dashboard.shared.chart_themes import build_color_assignment

logger = logging.getLogger(__name__)

ALL = "All"

SCATTER = "scatter"
LINE = "line"
BOTH_VIEWS: FrozenSet[str] = frozenset({SCATTER, LINE})

YearRange = Tuple[int, int]
Listener = Callable[[FrozenSet[str]], None]


@dataclass(frozen=True)
class FilterState:
    scatter_years: YearRange
    line_years: YearRange
    league: str = ALL
    team: str = ALL


def leagues_for(data: pd.DataFrame) -> List[str]:
    """Sorted distinct league ids."""
    return sorted(data["lgID"].dropna().astype(str).unique())


def teams_for(league: str, data: pd.DataFrame) -> List[str]:
    """Sorted distinct team names in ``league`` (every team for "All")."""
    if league != ALL:
        data = data[data["lgID"] == league]
    return sorted(data["name"].dropna().astype(str).unique())


def filter_records(data: pd.DataFrame, years: YearRange, league: str = ALL) -> pd.DataFrame:
    """Rows inside the inclusive year range, optionally limited to one league."""
    lo, hi = years
    mask = (data["yearID"] >= lo) & (data["yearID"] <= hi)
    if league != ALL:
        mask &= data["lgID"] == league
    return data.loc[mask]


class DashboardController:
    """
    Holds the loaded dataset and the current filter selections.

    Args:
        data: Working dataset produced by the loader
    """

    def __init__(self, data: pd.DataFrame):
        self.data = data

        if data.empty:
            self.min_year = self.max_year = 0
        else:
            self.min_year = int(data["yearID"].min())
            self.max_year = int(data["yearID"].max())

        self.leagues = leagues_for(data)
        self.color_assignment = build_color_assignment(self.leagues)
        self.team_options = teams_for(ALL, data)

        full_range = (self.min_year, self.max_year)
        self.state = FilterState(scatter_years=full_range, line_years=full_range)
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _commit(self, new_state: FilterState, views: FrozenSet[str]) -> FrozenSet[str]:
        self.state = new_state
        logger.debug(f"Filter change {new_state} redraws {sorted(views)}")
        for listener in self._listeners:
            listener(views)
        return views

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    @property
    def year_bounds(self) -> YearRange:
        return self.min_year, self.max_year

    def _clamp(self, lo: int, hi: int) -> YearRange:
        lo, hi = int(lo), int(hi)
        if lo > hi:
            lo, hi = hi, lo
        lo = min(max(lo, self.min_year), self.max_year)
        hi = min(max(hi, self.min_year), self.max_year)
        return lo, hi

    def set_scatter_year_range(self, lo: int, hi: int) -> FrozenSet[str]:
        years = self._clamp(lo, hi)
        return self._commit(replace(self.state, scatter_years=years), frozenset({SCATTER}))

    def set_line_year_range(self, lo: int, hi: int) -> FrozenSet[str]:
        years = self._clamp(lo, hi)
        return self._commit(replace(self.state, line_years=years), frozenset({LINE}))

    def set_league(self, league: str) -> FrozenSet[str]:
        """Select a league; the team selection always resets to "All"."""
        if league != ALL and league not in self.leagues:
            raise ValueError(f"Unknown league '{league}'")

        self.team_options = teams_for(league, self.data)
        return self._commit(replace(self.state, league=league, team=ALL), BOTH_VIEWS)

    def set_team(self, team: str) -> FrozenSet[str]:
        if team != ALL and team not in self.team_options:
            raise ValueError(f"Team '{team}' is not in league '{self.state.league}'")

        return self._commit(replace(self.state, team=team), BOTH_VIEWS)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def highlight_team(self) -> Optional[str]:
        return None if self.state.team == ALL else self.state.team

    def scatter_records(self) -> pd.DataFrame:
        return filter_records(self.data, self.state.scatter_years, self.state.league)

    def line_records(self) -> pd.DataFrame:
        return filter_records(self.data, self.state.line_years, self.state.league)
