"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return transformed DataFrames.

Modules:
- summary: YearTable projection and month-by-year count pivot
- states:  State validation/filtering and coordinate sentinel cleaning
"""

from .summary import (
    month_year_table,
    combine_year_tables,
    summarize_month_counts,
)

from .states import (
    FARS_STATE_NAMES,
    InvalidStateError,
    state_name,
    select_state,
    sanitize_coordinates,
    coordinate_bounds,
)

__all__ = [
    # Summary
    'month_year_table',
    'combine_year_tables',
    'summarize_month_counts',
    # States
    'FARS_STATE_NAMES',
    'InvalidStateError',
    'state_name',
    'select_state',
    'sanitize_coordinates',
    'coordinate_bounds',
]
