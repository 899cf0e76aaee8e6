"""
Runtime settings for the dashboard.

Settings are resolved at call time in this order:
- environment variable
- Streamlit secrets (``.streamlit/secrets.toml``), if present
- built-in default
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import streamlit as st

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_DATA_PATH = PROJECT_ROOT / "data" / "Teams.csv"

# Seasons before this year are dropped at load time
MIN_YEAR = 1960

REQUIRED_COLUMNS = ["yearID", "lgID", "teamID", "name", "G", "R", "W"]


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Look up a setting from the environment, then Streamlit secrets."""
    value = os.environ.get(name)
    if value:
        return value

    # Reading st.secrets without a secrets file reports an error on the page
    try:
        if st.secrets.load_if_toml_exists():
            value = st.secrets.get(name, None)
    except Exception:
        value = None

    return value if value else default


def get_data_path() -> Path:
    """Path of the team-season CSV (``TEAMS_CSV``)."""
    configured = get_setting("TEAMS_CSV")
    if not configured:
        return DEFAULT_DATA_PATH

    path = Path(configured).expanduser()
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


def get_log_level() -> str:
    return (get_setting("LOG_LEVEL", "INFO") or "INFO").upper()
