"""
FARS State Map (Imperative Shell)

Reads one data year, hands the state's rows to the Functional Core for
validation and sentinel cleaning, then draws them with
``plotting.plot_state_accidents``.

Package Location: src/fars/reports/maps.py

Two distinct early exits:
    - The state code never appears in the year's data: ``InvalidStateError``
      is raised to the caller.
    - The state filter leaves no rows: an INFO "no accidents to plot"
      notice is logged and nothing is drawn.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import plotly.graph_objects as go

from ..analysis.states import sanitize_coordinates, select_state
from ..data.reader import (
    PathLike,
    coerce_year,
    fars_read,
    make_filename,
    resolve_path,
)
from ..plotting.state_map import plot_state_accidents

log = logging.getLogger(__name__)


def fars_map_state(
    state_id: Any,
    year: Any,
    fig: Optional[go.Figure] = None,
    data_dir: Optional[PathLike] = None,
) -> Optional[go.Figure]:
    """
    Plot the accident locations of one state for one FARS year.

    Unlike ``fars_read_years``, a missing file is not caught here.

    Args:
        state_id: FARS state code; coerced with ``int()``.
        year: Data year.
        fig: Render target passed through to ``plot_state_accidents``.
        data_dir: Directory holding the yearly files.

    Returns:
        The Figure drawn on, or ``None`` when there was nothing to plot.

    Raises:
        FarsFileNotFoundError: If the year's file does not exist.
        InvalidStateError: If *state_id* is not present in that year.
    """
    path = resolve_path(make_filename(year), data_dir)
    data = fars_read(path)
    state_id = int(state_id)

    data_sub = select_state(data, state_id)
    if data_sub.empty:
        log.info(
            "no accidents to plot",
            extra={"state": state_id, "year": str(year)},
        )
        return None

    data_sub = sanitize_coordinates(data_sub)
    return plot_state_accidents(data_sub, state_id, coerce_year(year), fig=fig)
