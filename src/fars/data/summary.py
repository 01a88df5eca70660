"""
FARS Summary Orchestration (Imperative Shell)

Loads the requested years through ``reader.fars_read_years`` and delegates
the grouping and pivot to the Functional Core (analysis/summary.py).

Package Location: src/fars/data/summary.py
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

import pandas as pd

from .reader import PathLike, fars_read_years
from ..analysis.summary import combine_year_tables, summarize_month_counts


def fars_summarize_years(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Monthly accident counts for several FARS years, one column per year.

    Years that fail to load are skipped with a ``FarsYearWarning`` (see
    ``fars_read_years``); they contribute no column.

    Args:
        years: Sequence of data years.
        data_dir: Directory holding the yearly files.  Defaults to the
            working directory.

    Returns:
        DataFrame with a ``MONTH`` column and one nullable ``Int64`` count
        column per loaded year.  Empty (``MONTH`` only) when no year loads.
    """
    tables = fars_read_years(years, data_dir=data_dir)
    return summarize_month_counts(combine_year_tables(tables))
