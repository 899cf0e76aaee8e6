"""
Data access for the dashboard.

Modules:
- loader: Team-season CSV loading and the runs-per-game metric
- aggregation: Per-year group statistics
"""

from .aggregation import AggregatedPoint, aggregate_mean_by_year, to_points
from .loader import load_teams, load_teams_cached

__all__ = [
    'AggregatedPoint',
    'aggregate_mean_by_year',
    'to_points',
    'load_teams',
    'load_teams_cached',
]
