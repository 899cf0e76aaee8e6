"""
DataFrame utility functions for cleaning and transforming data.
"""

import pandas as pd
from typing import List

from rpg_dashboard.utils.exceptions import ChartRenderError


def clean_dataframe(df: pd.DataFrame) -> pd.DataFrame:
    """
    Clean dataframe by removing duplicate columns and stripping column names.

    Args:
        df: DataFrame to clean

    Returns:
        Cleaned DataFrame
    """
    if df is None or df.empty:
        return df

    # Ensure all column names are stripped strings
    df.columns = [str(col).strip() for col in df.columns]

    # Remove duplicate columns (keep first occurrence)
    if df.columns.duplicated().any():
        df = df.loc[:, ~df.columns.duplicated(keep='first')]

    return df


def ensure_numeric(df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
    """
    Ensure specified columns are numeric types. Unparseable values become NaN.

    Example:
        ```python
        df = ensure_numeric(df, ['G', 'R', 'W'])
        ```
    """
    for col in columns:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors='coerce')

    return df


def is_truthy(series: pd.Series) -> pd.Series:
    """Mask of values that are present and non-zero."""
    return series.notna() & (series != 0)


def require_columns(df: pd.DataFrame, columns: List[str], what: str) -> None:
    """
    Fail fast when a chart is handed a frame without the columns it plots.

    Raises:
        ChartRenderError: one or more columns are missing
    """
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ChartRenderError(f"{what} needs columns: {', '.join(missing)}")
