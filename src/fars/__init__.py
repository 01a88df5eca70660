"""
FARS - Fatality Analysis Reporting System helpers

Loads the yearly NHTSA FARS accident files, summarizes accident counts by
month and year, and maps accident locations for a single state, using the
Functional Core, Imperative Shell layout.

Structure:
- data/     : Imperative Shell (file I/O)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : orchestration and file output
"""

from .data import (
    FarsFileNotFoundError,
    FarsYearWarning,
    fars_read,
    fars_read_years,
    fars_summarize_years,
    make_filename,
)
from .analysis import InvalidStateError
from .reports import fars_map_state

__version__ = "0.1.0"

__all__ = [
    'make_filename',
    'fars_read',
    'fars_read_years',
    'fars_summarize_years',
    'fars_map_state',
    'FarsFileNotFoundError',
    'FarsYearWarning',
    'InvalidStateError',
]
