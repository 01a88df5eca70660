"""
FARS Data Reader (Imperative Shell)

Locates and loads the annual FARS accident files and hands the resulting
DataFrames to the functional core (src/fars/analysis/).

Package Location: src/fars/data/reader.py

File naming:
    One bz2-compressed CSV per data year, named ``accident_<year>.csv.bz2``.
    ``make_filename`` never includes a directory; callers that keep the
    files elsewhere pass ``data_dir`` and the name is joined onto it.

Failure policy:
    ``fars_read`` surfaces a missing file immediately.  ``fars_read_years``
    is a batch call: each year is loaded in isolation and a failure is
    downgraded to a ``FarsYearWarning`` plus a ``None`` placeholder, so the
    returned list always has one slot per requested year.
"""

from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from ..analysis.summary import month_year_table

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

_FILENAME_PATTERN: str = "accident_{year}.csv.bz2"

# Stands in for a year that cannot be read as a number.
_MISSING_YEAR: str = "NA"


class FarsFileNotFoundError(FileNotFoundError):
    """Raised when a FARS data file is not present on disk."""

    def __init__(self, path: PathLike) -> None:
        self.path = str(path)
        super().__init__(f"file '{self.path}' does not exist")


class FarsYearWarning(UserWarning):
    """Emitted by ``fars_read_years`` for each year that could not be loaded."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year: Any) -> str:
    """
    Build the canonical file name for one FARS data year.

    Args:
        year: Integer year, or anything ``int()`` can truncate to one
            (``"2013"``, ``2013.0``).

    Returns:
        ``'accident_<year>.csv.bz2'``.  Never raises: no range check is
        made, and a value that is not a number (``'abc'``, ``None``, NaN)
        yields ``'accident_NA.csv.bz2'``, a name no data file carries.

    Example:
        >>> make_filename("2013")
        'accident_2013.csv.bz2'
    """
    try:
        label = str(coerce_year(year))
    except (TypeError, ValueError, OverflowError):
        label = _MISSING_YEAR
    return _FILENAME_PATTERN.format(year=label)


def fars_read(filename: PathLike) -> pd.DataFrame:
    """
    Load one FARS accident file into memory.

    Compression is inferred from the ``.bz2`` suffix.  Non-fatal parser
    diagnostics (mixed-type columns, fallback engine notices) are
    suppressed; genuine parse errors still propagate.

    Args:
        filename: Path to a FARS CSV file, usually from ``make_filename``.

    Returns:
        DataFrame with the header's column names and inferred dtypes and a
        plain ``RangeIndex`` (no row-name column).

    Raises:
        FarsFileNotFoundError: If *filename* does not exist.
    """
    path = Path(filename)
    if not path.exists():
        raise FarsFileNotFoundError(filename)

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", pd.errors.DtypeWarning)
        warnings.simplefilter("ignore", pd.errors.ParserWarning)
        df = pd.read_csv(path, low_memory=False)

    log.debug(
        f"Read {len(df)} rows from {path}",
        extra={"path": str(path), "rows": len(df)},
    )
    return df


def fars_read_years(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Load the MONTH column of several FARS years, one table per year.

    Each year is handled independently: the file name is built, the file
    is read and projected to ``[MONTH, year]`` with *year* written as a
    constant column.  Any exception along the way is caught, reported as a
    ``FarsYearWarning`` (``"invalid year: <year>"``) and replaced by
    ``None`` so the remaining years still load.  Duplicate years are read
    once per occurrence.

    Args:
        years: Sequence of data years.
        data_dir: Directory holding the ``accident_<year>.csv.bz2`` files.
            Defaults to the working directory.

    Returns:
        List the same length and order as *years*; each entry is a
        two-column DataFrame or ``None``.
    """
    results: List[Optional[pd.DataFrame]] = []
    for year in years:
        try:
            path = resolve_path(make_filename(year), data_dir)
            results.append(month_year_table(fars_read(path), coerce_year(year)))
        except Exception as exc:
            log.warning(
                f"Skipping year {year!r}: {exc}",
                extra={"year": str(year)},
            )
            warnings.warn(f"invalid year: {year}", FarsYearWarning, stacklevel=2)
            results.append(None)
    return results


# ---------------------------------------------------------------------------
# Path and year helpers
# ---------------------------------------------------------------------------

def coerce_year(year: Any) -> int:
    """Truncate *year* to an int; strings go through float for '2013.0'."""
    if isinstance(year, str):
        return int(float(year.strip()))
    return int(year)


def resolve_path(filename: str, data_dir: Optional[PathLike]) -> Path:
    """Join *filename* onto *data_dir*, or leave it cwd-relative when None."""
    if data_dir is None:
        return Path(filename)
    return Path(data_dir) / filename
