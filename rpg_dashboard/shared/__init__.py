"""
Shared utilities for the Streamlit UI.

Modules:
- chart_themes: Plotly layout, league colours and nice axis bounds
- tooltip: Hover label style and hover templates
- components: Headers and chart titles
- dataframe_utils: DataFrame cleaning utilities
"""

from .chart_themes import (
    LEAGUE_COLORS,
    build_color_assignment,
    get_base_layout,
    get_plotly_template,
    nice_domain,
)

from .dataframe_utils import (
    clean_dataframe,
    ensure_numeric,
)

__all__ = [
    # Chart theming
    'LEAGUE_COLORS',
    'build_color_assignment',
    'get_base_layout',
    'get_plotly_template',
    'nice_domain',

    # DataFrame utilities
    'clean_dataframe',
    'ensure_numeric',
]
