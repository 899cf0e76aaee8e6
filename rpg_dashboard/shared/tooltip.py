"""
Hover overlay shared by both charts.

Plotly shows, moves and hides the label itself; this module owns its look and
the text of every hover template so the two charts read the same.
"""

HOVER_LABEL = dict(
    bgcolor="rgba(255, 255, 255, 0.95)",
    bordercolor="#999999",
    font=dict(size=12, color="#222222", family="system-ui, -apple-system, sans-serif"),
    align="left",
)

# customdata columns for scatter points, in order
SCATTER_HOVER_FIELDS = ["name", "yearID", "lgID", "W", "runsPerGame"]

SCATTER_HOVER_TEMPLATE = (
    "<b>%{customdata[0]}</b><br>"
    "Year: %{customdata[1]}<br>"
    "League: %{customdata[2]}<br>"
    "Wins: %{customdata[3]}<br>"
    "Runs/Game: %{customdata[4]:.2f}"
    "<extra></extra>"
)

LEAGUE_AVG_HOVER_TEMPLATE = (
    "Year: %{x}<br>"
    "League Avg Runs/Game: %{y:.2f}"
    "<extra></extra>"
)


def team_hover_template(team: str) -> str:
    """Hover text for a highlighted team's line point."""
    return (
        f"<b>{team}</b><br>"
        "Year: %{x}<br>"
        "Runs/Game: %{y:.2f}"
        "<extra></extra>"
    )
