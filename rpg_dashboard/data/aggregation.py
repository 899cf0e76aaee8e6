"""Group-wise statistics over team-season records."""
from __future__ import annotations

from typing import List, NamedTuple

import pandas as pd

YEAR_COLUMN = "yearID"


class AggregatedPoint(NamedTuple):
    year: int
    value: float


def aggregate_mean_by_year(records: pd.DataFrame, value_field: str = "runsPerGame") -> pd.DataFrame:
    """
    Mean of ``value_field`` per year.

    Args:
        records: Team-season rows (must carry ``yearID`` and ``value_field``)
        value_field: Column to average

    Returns:
        DataFrame with columns ``year`` and ``value``, ascending by year.
        Empty input gives an empty frame with the same columns.
    """
    if records is None or records.empty:
        return pd.DataFrame({"year": pd.Series(dtype=int), "value": pd.Series(dtype=float)})

    series = (
        records.groupby(YEAR_COLUMN)[value_field]
        .mean()
        .sort_index()
    )
    return pd.DataFrame({
        "year": series.index.astype(int),
        "value": series.to_numpy(dtype=float),
    })


def to_points(aggregated: pd.DataFrame) -> List[AggregatedPoint]:
    """Convert an aggregated frame into ``AggregatedPoint`` tuples."""
    return [
        AggregatedPoint(int(year), float(value))
        for year, value in zip(aggregated["year"], aggregated["value"])
    ]
