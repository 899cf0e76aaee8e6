"""
Exception handling utilities for the dashboard.
Provides the error hierarchy and the chart error guard.
"""

import logging
from functools import wraps
from typing import Any, Callable

import streamlit as st

logger = logging.getLogger(__name__)


class DashboardError(Exception):
    """Base exception for dashboard errors."""

    pass


class DatasetLoadError(DashboardError):
    """Raised when the team-season dataset cannot be read or parsed."""

    pass


class ChartRenderError(DashboardError):
    """Raised when a chart cannot be drawn."""

    pass


def handle_chart_errors(chart_name: str) -> Callable:
    """
    Decorator that keeps a failing chart from taking down the page.

    Args:
        chart_name: Name shown to the user and written to the log

    Returns:
        Decorator function
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except KeyError as e:
                logger.error(f"{chart_name}: data column missing: {e}")
                st.error(f"❌ {chart_name} unavailable: required column {str(e)} not found")
                return None
            except ChartRenderError as e:
                logger.error(f"{chart_name}: {e}")
                st.error(f"❌ {chart_name} unavailable: {str(e)}")
                return None
            except Exception as e:
                logger.error(f"Unexpected error drawing {chart_name}: {e}", exc_info=True)
                st.error(f"❌ Error drawing {chart_name}: {str(e)}")
                return None

        return wrapper

    return decorator
