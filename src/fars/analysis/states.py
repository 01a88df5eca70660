"""
FARS State Selection and Coordinate Cleaning (Functional Core)

Pure functions only. No file I/O, no side effects.

Package Location: src/fars/analysis/states.py

Coordinate sentinels:
    FARS encodes an unrecorded position with out-of-range codes
    (e.g. LATITUDE 99.9999, LONGITUD 999.9999).  Any ``LONGITUD > 900``
    or ``LATITUDE > 90`` is replaced with NaN before plotting.  The two
    thresholds are FARS-specific and are not interchangeable.

State codes:
    FARS uses the FIPS numeric state codes (1 = Alabama, 16 = Idaho ...).
    ``FARS_STATE_NAMES`` is for labelling only; whether a code is valid is
    decided by the data year being plotted, not by this table.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

STATE_COL: str = "STATE"
LAT_COL: str = "LATITUDE"
LON_COL: str = "LONGITUD"

_LAT_SENTINEL: float = 90.0
_LON_SENTINEL: float = 900.0

FARS_STATE_NAMES: Dict[int, str] = {
    1: "Alabama",        2: "Alaska",          4: "Arizona",
    5: "Arkansas",       6: "California",      8: "Colorado",
    9: "Connecticut",    10: "Delaware",       11: "District of Columbia",
    12: "Florida",       13: "Georgia",        15: "Hawaii",
    16: "Idaho",         17: "Illinois",       18: "Indiana",
    19: "Iowa",          20: "Kansas",         21: "Kentucky",
    22: "Louisiana",     23: "Maine",          24: "Maryland",
    25: "Massachusetts", 26: "Michigan",       27: "Minnesota",
    28: "Mississippi",   29: "Missouri",       30: "Montana",
    31: "Nebraska",      32: "Nevada",         33: "New Hampshire",
    34: "New Jersey",    35: "New Mexico",     36: "New York",
    37: "North Carolina", 38: "North Dakota",  39: "Ohio",
    40: "Oklahoma",      41: "Oregon",         42: "Pennsylvania",
    43: "Puerto Rico",   44: "Rhode Island",   45: "South Carolina",
    46: "South Dakota",  47: "Tennessee",      48: "Texas",
    49: "Utah",          50: "Vermont",        51: "Virginia",
    52: "Virgin Islands", 53: "Washington",    54: "West Virginia",
    55: "Wisconsin",     56: "Wyoming",
}


class InvalidStateError(ValueError):
    """Raised when a state code has no rows in the loaded data year."""

    def __init__(self, state_id: Any) -> None:
        self.state_id = state_id
        super().__init__(f"invalid STATE number: {state_id}")


def state_name(state_id: int) -> str:
    """Display name for a FARS state code, falling back to ``'State <id>'``."""
    return FARS_STATE_NAMES.get(int(state_id), f"State {state_id}")


def select_state(df: pd.DataFrame, state_id: int) -> pd.DataFrame:
    """
    Return the accident rows recorded for one state.

    Args:
        df: Accident DataFrame with a ``STATE`` column.
        state_id: FARS state code.

    Returns:
        Copy of the matching rows.  May be empty in principle; callers treat
        that separately from an unknown code.

    Raises:
        InvalidStateError: If *state_id* is not among the distinct
            ``STATE`` values in *df*.
        ValueError: If ``STATE`` is missing.
    """
    validate_columns(df, required=[STATE_COL])
    if state_id not in set(df[STATE_COL].dropna().unique().tolist()):
        raise InvalidStateError(state_id)
    return df.loc[df[STATE_COL] == state_id].copy()


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace FARS coordinate sentinels with NaN.

    Args:
        df: Rows with ``LATITUDE`` and ``LONGITUD`` columns.

    Returns:
        Copy of *df* with float coordinates; ``LONGITUD > 900`` and
        ``LATITUDE > 90`` become NaN.  Rows are never dropped.
    """
    validate_columns(df, required=[LAT_COL, LON_COL])
    out = df.copy()
    out[LAT_COL] = pd.to_numeric(out[LAT_COL], errors="coerce").astype(float)
    out[LON_COL] = pd.to_numeric(out[LON_COL], errors="coerce").astype(float)
    out.loc[out[LON_COL] > _LON_SENTINEL, LON_COL] = np.nan
    out.loc[out[LAT_COL] > _LAT_SENTINEL, LAT_COL] = np.nan
    return out


def coordinate_bounds(
    df: pd.DataFrame,
) -> Optional[Tuple[Tuple[float, float], Tuple[float, float]]]:
    """
    ``((lat_min, lat_max), (lon_min, lon_max))`` over non-null values.

    Latitude and longitude ranges are taken independently, so a row with
    only one valid coordinate still widens that axis.  Returns ``None``
    when either axis has no valid values.
    """
    lat = df[LAT_COL].dropna()
    lon = df[LON_COL].dropna()
    if lat.empty or lon.empty:
        return None
    return (float(lat.min()), float(lat.max())), (float(lon.min()), float(lon.max()))


def validate_columns(df: pd.DataFrame, required: List[str]) -> None:
    """Raise ValueError naming any *required* columns absent from *df*."""
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"DataFrame is missing required columns: {missing}")
