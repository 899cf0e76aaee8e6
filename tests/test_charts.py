"""Unit tests for the chart builders and shared chart helpers."""

import pandas as pd
import pytest

from rpg_dashboard.shared.chart_themes import LEAGUE_COLORS, build_color_assignment, nice_domain
from rpg_dashboard.state import DashboardController
from rpg_dashboard.tabs.line_chart import build_line_figure
from rpg_dashboard.tabs.scatter_chart import BASE_SIZE, HIGHLIGHT_SIZE, build_scatter_figure
from rpg_dashboard.utils.exceptions import ChartRenderError


def _points(fig) -> list:
    """All (x, y) pairs drawn by traces that carry data."""
    pairs = []
    for trace in fig.data:
        pairs.extend((x, y) for x, y in zip(trace.x, trace.y) if x is not None)
    return sorted(pairs)


# ============================================
# Shared helpers
# ============================================

@pytest.mark.parametrize(
    "lo, hi, expected",
    [
        (2.93, 5.67, (2.8, 5.8)),
        (3, 7, (3.0, 7.0)),
        (0.3, 97, (0.0, 100.0)),
        (7, 3, (3.0, 7.0)),
        (4.0, 4.0, (3.0, 5.0)),
    ],
)
def test_nice_domain(lo, hi, expected) -> None:
    assert nice_domain(lo, hi) == pytest.approx(expected)


def test_color_assignment_is_sorted_and_stable() -> None:
    colors = build_color_assignment(["NL", "AL", "NL", "FL"])
    assert list(colors) == ["AL", "FL", "NL"]
    assert colors == {"AL": LEAGUE_COLORS[0], "FL": LEAGUE_COLORS[1], "NL": LEAGUE_COLORS[2]}


def test_color_assignment_cycles_palette() -> None:
    leagues = [f"L{i:02d}" for i in range(12)]
    colors = build_color_assignment(leagues)
    assert colors["L10"] == LEAGUE_COLORS[0]


# ============================================
# Scatter
# ============================================

def test_scatter_scenario(scenario_df: pd.DataFrame) -> None:
    controller = DashboardController(scenario_df)
    fig = build_scatter_figure(controller.scatter_records(), controller.color_assignment, theme="light")

    assert [t.name for t in fig.data] == ["AL", "NL"]
    assert _points(fig) == [(2.0, 3), (4.0, 5), (5.0, 7)]
    assert fig.data[0].marker.color == controller.color_assignment["AL"]
    assert list(fig.data[0].marker.size) == [BASE_SIZE, BASE_SIZE]
    assert fig.layout.xaxis.range == pytest.approx((2.0, 5.0))
    assert fig.layout.yaxis.range == pytest.approx((3.0, 7.0))
    assert fig.layout.xaxis.title.text == "Runs per Game"
    assert fig.layout.yaxis.title.text == "Wins"


def test_scatter_hover_carries_details(scenario_df: pd.DataFrame) -> None:
    fig = build_scatter_figure(scenario_df, build_color_assignment(scenario_df["lgID"]), theme="light")
    nl = fig.data[1]
    assert list(nl.customdata[0]) == ["Cubs", 1960, "NL", 3, pytest.approx(2.0)]
    assert "Runs/Game: %{customdata[4]:.2f}" in nl.hovertemplate
    assert "<b>%{customdata[0]}</b>" in nl.hovertemplate


def test_scatter_highlight_team(scenario_df: pd.DataFrame) -> None:
    colors = build_color_assignment(scenario_df["lgID"])
    fig = build_scatter_figure(scenario_df, colors, highlight_team="Red Sox", theme="light")

    al, nl, legend_only = fig.data
    assert list(al.marker.size) == [HIGHLIGHT_SIZE, HIGHLIGHT_SIZE]
    assert all(width > 0 for width in al.marker.line.width)
    assert list(nl.marker.size) == [BASE_SIZE]
    assert list(nl.marker.line.width) == [0]
    assert legend_only.name == "Red Sox"
    assert legend_only.hoverinfo == "skip"


def test_scatter_legend_lists_every_league(scenario_df: pd.DataFrame) -> None:
    controller = DashboardController(scenario_df)
    controller.set_league("AL")
    fig = build_scatter_figure(controller.scatter_records(), controller.color_assignment, theme="light")
    assert [t.name for t in fig.data] == ["AL", "NL"]
    assert len(fig.data[1].x) == 0


def test_scatter_empty_subset(scenario_df: pd.DataFrame) -> None:
    colors = build_color_assignment(scenario_df["lgID"])
    fig = build_scatter_figure(scenario_df.iloc[0:0], colors, theme="light")
    assert _points(fig) == []
    assert fig.layout.xaxis.visible is False
    assert fig.layout.yaxis.visible is False
    assert fig.layout.annotations[0].text == "No seasons in range"


def test_scatter_is_idempotent(sample_df: pd.DataFrame) -> None:
    colors = build_color_assignment(sample_df["lgID"])
    first = build_scatter_figure(sample_df, colors, "New York Yankees", theme="light")
    second = build_scatter_figure(sample_df, colors, "New York Yankees", theme="light")
    assert first.to_json() == second.to_json()


def test_scatter_single_year(sample_df: pd.DataFrame) -> None:
    controller = DashboardController(sample_df)
    controller.set_scatter_year_range(1962, 1962)
    fig = build_scatter_figure(controller.scatter_records(), controller.color_assignment, theme="light")
    assert len(_points(fig)) == 2


# ============================================
# Line
# ============================================

def test_line_scenario_league_average(scenario_df: pd.DataFrame) -> None:
    fig = build_line_figure(scenario_df, theme="light")
    assert len(fig.data) == 1
    league = fig.data[0]
    assert league.name == "League Avg"
    assert league.mode == "lines+markers"
    assert list(league.x) == [1960, 1961]
    assert list(league.y) == pytest.approx([3.0, 5.0])
    assert fig.layout.xaxis.range == (1960, 1961)
    assert fig.layout.xaxis.tickformat == "d"
    assert fig.layout.yaxis.range == pytest.approx((3.0, 5.0))


def test_line_scenario_team_series(scenario_df: pd.DataFrame) -> None:
    fig = build_line_figure(scenario_df, highlight_team="Red Sox", theme="light")
    league, team = fig.data
    assert list(league.y) == pytest.approx([3.0, 5.0])
    assert team.name == "Red Sox"
    assert list(team.x) == [1960, 1961]
    assert list(team.y) == pytest.approx([4.0, 5.0])
    assert "<b>Red Sox</b>" in team.hovertemplate
    assert "League Avg" in league.hovertemplate


def test_line_single_year_has_one_point(sample_df: pd.DataFrame) -> None:
    controller = DashboardController(sample_df)
    controller.set_line_year_range(1961, 1961)
    fig = build_line_figure(controller.line_records(), theme="light")
    assert list(fig.data[0].x) == [1961]
    assert fig.layout.xaxis.range == (1960, 1962)


def test_line_team_without_seasons_in_range(sample_df: pd.DataFrame) -> None:
    controller = DashboardController(sample_df)
    controller.set_league("AL")
    controller.set_team("Boston Red Sox")
    controller.set_line_year_range(1962, 1962)

    fig = build_line_figure(controller.line_records(), controller.highlight_team, theme="light")
    assert all(len(trace.x) == 0 for trace in fig.data)
    assert fig.layout.xaxis.visible is False
    assert fig.layout.annotations[0].text == "No seasons in range"


def test_line_is_idempotent(sample_df: pd.DataFrame) -> None:
    first = build_line_figure(sample_df, "Chicago Cubs", theme="light")
    second = build_line_figure(sample_df, "Chicago Cubs", theme="light")
    assert first.to_json() == second.to_json()


def test_builders_reject_frames_without_plotted_columns() -> None:
    frame = pd.DataFrame({"yearID": [1970], "lgID": ["AL"]})
    with pytest.raises(ChartRenderError, match="Scatter plot needs columns: name, W, runsPerGame"):
        build_scatter_figure(frame, {"AL": LEAGUE_COLORS[0]}, theme="light")
    with pytest.raises(ChartRenderError, match="Line chart needs columns: name, runsPerGame"):
        build_line_figure(frame, theme="light")
