"""Shared fixtures for the dashboard tests."""

import io
from pathlib import Path

import pandas as pd
import pytest

from rpg_dashboard.data.loader import load_teams

DATA_DIR = Path(__file__).parent / "data"

SCENARIO_CSV = """yearID,lgID,teamID,name,G,R,W
1960,AL,BOS,Red Sox,10,40,5
1960,NL,CHN,Cubs,10,20,3
1961,AL,BOS,Red Sox,10,50,7
"""


@pytest.fixture
def sample_csv_path() -> Path:
    return DATA_DIR / "teams_sample.csv"


@pytest.fixture
def sample_df(sample_csv_path: Path) -> pd.DataFrame:
    return load_teams(sample_csv_path)


@pytest.fixture
def scenario_df() -> pd.DataFrame:
    """Three seasons: Red Sox (AL) 1960-61 and Cubs (NL) 1960."""
    return load_teams(io.StringIO(SCENARIO_CSV))
