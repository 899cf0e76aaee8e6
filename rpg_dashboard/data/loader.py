"""
Team-season dataset loader.

Reads the Lahman-style ``Teams.csv``, keeps complete seasons from 1960 on and
derives runs per game. The returned frame is the working dataset for the whole
session and is never modified afterwards.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

import pandas as pd
import streamlit as st

from rpg_dashboard.config import MIN_YEAR, REQUIRED_COLUMNS
from rpg_dashboard.shared.dataframe_utils import clean_dataframe, ensure_numeric, is_truthy
from rpg_dashboard.utils.exceptions import DatasetLoadError
from rpg_dashboard.utils.performance import log_performance

logger = logging.getLogger(__name__)

STAT_COLUMNS = ["G", "R", "W"]
LABEL_COLUMNS = ["lgID", "name"]


def _read_source(source: Union[str, Path, IO]) -> pd.DataFrame:
    try:
        return pd.read_csv(source)
    except (OSError, ValueError) as e:
        # ParserError, EmptyDataError and UnicodeDecodeError are ValueErrors
        raise DatasetLoadError(f"Could not read team data from {source}: {e}") from e


@log_performance("load_teams")
def load_teams(source: Union[str, Path, IO]) -> pd.DataFrame:
    """
    Load and prepare the team-season dataset.

    Args:
        source: Path or file-like object holding the CSV

    Returns:
        DataFrame with the source columns plus ``runsPerGame``

    Raises:
        DatasetLoadError: the source is missing, unparseable or lacks a
            required column
    """
    raw = clean_dataframe(_read_source(source))

    missing = [col for col in REQUIRED_COLUMNS if col not in raw.columns]
    if missing:
        raise DatasetLoadError(f"Team data is missing required columns: {', '.join(missing)}")

    df = ensure_numeric(raw.copy(), ["yearID", *STAT_COLUMNS])

    keep = df["yearID"].notna() & (df["yearID"] >= MIN_YEAR)
    for col in STAT_COLUMNS:
        keep &= is_truthy(df[col])
    # A season with no league or team name has nowhere to be plotted
    for col in LABEL_COLUMNS:
        keep &= df[col].notna() & (df[col].astype(str).str.strip() != "")

    df = df.loc[keep].copy()
    for col in ["yearID", *STAT_COLUMNS]:
        df[col] = df[col].astype(int)
    for col in ["lgID", "teamID", "name"]:
        df[col] = df[col].astype(str)

    df["runsPerGame"] = df["R"] / df["G"]
    df = df.reset_index(drop=True)

    logger.info(f"Loaded {len(df)} team seasons ({len(raw) - len(df)} rows excluded)")
    return df


@st.cache_data(show_spinner=False)
def load_teams_cached(path: str) -> pd.DataFrame:
    """Process-wide cached load keyed on the CSV path."""
    return load_teams(path)
