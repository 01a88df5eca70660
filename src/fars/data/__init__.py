"""
FARS Data Package (Imperative Shell)

This package handles all file reading for the FARS helpers.

Modules:
- reader:  File naming, single-file loading, multi-year loading
- summary: Month-by-year accident count orchestration
"""

from .reader import (
    FarsFileNotFoundError,
    FarsYearWarning,
    make_filename,
    fars_read,
    fars_read_years,
)

from .summary import fars_summarize_years

__all__ = [
    # Reader
    'FarsFileNotFoundError',
    'FarsYearWarning',
    'make_filename',
    'fars_read',
    'fars_read_years',
    # Summary
    'fars_summarize_years',
]
