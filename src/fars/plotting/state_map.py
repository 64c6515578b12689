"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: sanitized accident rows for one state + map bounds.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Base map:
    State outlines come from plotly's built-in geo data: the ``north
    america`` scope with subunit (state) boundaries drawn, on a Mercator
    projection so the view can be clipped to the accident extent through
    the geo axis ranges.  With no extent the whole scope is shown.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.coordinates import MapBounds
from ..analysis.schema import LATITUDE, LONGITUDE, MONTH, validate_columns

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_MARKER_STYLE: Dict[str, Any] = {
    'size': 3,
    'color': 'black',
    'opacity': 0.8,
}

_GEO_STYLE: Dict[str, Any] = {
    'scope': 'north america',
    'projection_type': 'mercator',
    'showsubunits': True,
    'subunitcolor': 'gray',
    'showcountries': True,
    'showland': True,
    'landcolor': 'white',
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df_points: pd.DataFrame,
    bounds: Optional[MapBounds],
    title: str = '',
) -> go.Figure:
    """
    Build a scatter of accident locations over the US state map.

    Args:
        df_points: Rows to draw, each with non-missing ``LONGITUD`` and
            ``LATITUDE``.  A ``MONTH`` column, when present, is shown in
            the hover text.
        bounds: Extent to clip the map to, typically from
            ``coordinate_bounds``.  ``None`` shows the whole scope.
        title: Figure title.

    Returns:
        ``plotly.graph_objects.Figure`` with a single ``Scattergeo`` trace
        holding one marker per row.

    Raises:
        MissingColumnsError: If ``df_points`` lacks a coordinate column.
    """
    validate_columns(df_points, [LONGITUDE, LATITUDE], context='df_points')

    hover = None
    if MONTH in df_points.columns:
        hover = [f"Month {m}" for m in df_points[MONTH].astype('string').fillna('?')]

    fig = go.Figure(
        go.Scattergeo(
            lon=df_points[LONGITUDE].astype('float64').tolist(),
            lat=df_points[LATITUDE].astype('float64').tolist(),
            mode='markers',
            marker=_MARKER_STYLE,
            text=hover,
            name='Accidents',
            hoverinfo='lon+lat+text' if hover is not None else 'lon+lat',
        )
    )

    geo = dict(_GEO_STYLE)
    if bounds is not None:
        geo['lataxis'] = {'range': [bounds.lat_min, bounds.lat_max]}
        geo['lonaxis'] = {'range': [bounds.lon_min, bounds.lon_max]}
    fig.update_geos(**geo)

    fig.update_layout(
        title=title,
        showlegend=False,
        margin=dict(l=10, r=10, t=50 if title else 10, b=10),
        template='plotly_white',
    )

    return fig

