"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O.  The only object touched is the Figure the
caller passes in (or a fresh one when none is given).
Input: accident rows for a single state, sentinels already nulled.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Base map:
    Plotly's built-in geo layer with country and US state (sub-unit)
    boundaries drawn.  The latitude/longitude axis ranges are clipped to
    the bounding range of the valid coordinates so the selected state
    fills the view.  Mercator is used because the default 'albers usa'
    projection ignores axis ranges.
"""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.states import (
    LAT_COL,
    LON_COL,
    coordinate_bounds,
    state_name,
    validate_columns,
)

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_MARKER_STYLE = dict(color='black', size=3, opacity=0.8)

# Margin (degrees) added around the data bounds so edge points stay visible.
_BOUNDS_PAD: float = 0.25


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_accidents(
    df: pd.DataFrame,
    state_id: int,
    year: int,
    fig: Optional[go.Figure] = None,
) -> go.Figure:
    """
    Draw accident locations for one state over a state-outline base map.

    NaN coordinates are passed through as missing; plotly leaves them
    undrawn.  When no row has a valid latitude and longitude the outline
    is drawn without axis clipping and a warning is logged.

    Args:
        df: Accident rows with ``LATITUDE`` and ``LONGITUD`` columns, as
            returned by ``sanitize_coordinates``.
        state_id: FARS state code, used for the title.
        year: Data year, used for the title.
        fig: Render target.  The trace and geo layout are added to this
            Figure; a new ``go.Figure`` is created when omitted.

    Returns:
        The Figure that was drawn on.

    Raises:
        ValueError: If the coordinate columns are missing.
    """
    validate_columns(df, required=[LAT_COL, LON_COL])

    if fig is None:
        fig = go.Figure()

    title = f"{state_name(state_id)} Fatal Accidents, {year}"

    fig.add_trace(go.Scattergeo(
        lon=df[LON_COL],
        lat=df[LAT_COL],
        mode='markers',
        marker=_MARKER_STYLE,
        name=f"{year}",
        hovertemplate=(
            "Lat: %{lat:.4f}<br>"
            "Lon: %{lon:.4f}<extra></extra>"
        ),
    ))

    geo = dict(
        scope='north america',
        projection_type='mercator',
        resolution=50,
        showland=True,
        landcolor='white',
        showcountries=True,
        showsubunits=True,
        subunitcolor='gray',
        showlakes=False,
    )

    bounds = coordinate_bounds(df)
    if bounds is None:
        log.warning(
            f"No valid coordinates for state {state_id} in {year}; "
            "drawing outline without clipping.",
            extra={"state": int(state_id), "year": int(year)},
        )
        geo['fitbounds'] = False
    else:
        (lat_min, lat_max), (lon_min, lon_max) = bounds
        geo['lataxis'] = dict(range=[lat_min - _BOUNDS_PAD, lat_max + _BOUNDS_PAD])
        geo['lonaxis'] = dict(range=[lon_min - _BOUNDS_PAD, lon_max + _BOUNDS_PAD])

    fig.update_geos(**geo)
    fig.update_layout(
        title=dict(text=title),
        showlegend=False,
        margin=dict(l=10, r=10, t=50, b=10),
        template='plotly_white',
    )

    return fig

