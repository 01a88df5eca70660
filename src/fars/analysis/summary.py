"""
FARS Month/Year Summaries (Functional Core)

Pure functions only. No file I/O, no side effects.
Input/output is DataFrames.

Package Location: src/fars/analysis/summary.py

Table shapes:
    YearTable     ``[MONTH, year]``, one row per accident in a data year.
                  ``year`` is the requested year, never read from the file.
    SummaryTable  ``MONTH`` followed by one ``Int64`` count column per year.
                  A (month, year) pair with no accidents is ``<NA>``, not 0.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

MONTH_COL: str = "MONTH"
YEAR_COL: str = "year"


def month_year_table(df: pd.DataFrame, year: int) -> pd.DataFrame:
    """
    Project an accident DataFrame to its ``[MONTH, year]`` YearTable.

    Args:
        df: Raw accident rows; must contain ``MONTH``.
        year: Data year to stamp on every row.

    Returns:
        New two-column DataFrame; *df* is left untouched.

    Raises:
        KeyError: If ``MONTH`` is missing from *df*.
    """
    if MONTH_COL not in df.columns:
        raise KeyError(f"'{MONTH_COL}' column not found")
    out = df[[MONTH_COL]].copy()
    out[YEAR_COL] = year
    return out


def combine_year_tables(tables: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """Stack YearTables vertically, skipping ``None`` placeholders."""
    loaded: List[pd.DataFrame] = [t for t in tables if t is not None]
    if not loaded:
        return pd.DataFrame(columns=[MONTH_COL, YEAR_COL])
    return pd.concat(loaded, ignore_index=True)


def summarize_month_counts(df: pd.DataFrame) -> pd.DataFrame:
    """
    Count accidents per (year, MONTH) and pivot years into columns.

    Args:
        df: Combined YearTable rows (``MONTH``, ``year``).

    Returns:
        SummaryTable: a ``MONTH`` column plus one column per distinct
        year (ascending), rows sorted by month.  Rows with a blank MONTH
        are counted in a trailing NaN-month row rather than dropped, so
        the cells always sum to ``len(df)``.  Counts are nullable
        ``Int64``.  An empty input gives an empty frame with only
        ``MONTH``.

    Example:
        >>> summarize_month_counts(pd.DataFrame(
        ...     {'MONTH': [1, 1, 2], 'year': [2013, 2014, 2013]}))
           MONTH  2013  2014
        0      1     1     1
        1      2     1  <NA>
    """
    if df.empty:
        return pd.DataFrame(columns=[MONTH_COL])

    has_month = df[MONTH_COL].notna()
    wide = _count_by_month(df.loc[has_month])

    if not has_month.all():
        blank = df.loc[~has_month].groupby(YEAR_COL).size()
        blank_row = blank.to_frame(name=np.nan).T
        wide = blank_row if wide.empty else pd.concat([wide, blank_row])

    wide = wide.sort_index(axis=1).astype("Int64")
    wide.index.name = MONTH_COL
    wide.columns.name = None
    return wide.reset_index()


def _count_by_month(df: pd.DataFrame) -> pd.DataFrame:
    """Month-indexed, year-columned counts for rows with a known MONTH."""
    if df.empty:
        return pd.DataFrame(index=pd.Index([], name=MONTH_COL))
    return df.groupby([YEAR_COL, MONTH_COL]).size().unstack(YEAR_COL).sort_index()
