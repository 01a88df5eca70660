"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: calls the data shell for tables, the map shell
for figures, and writes CSV / HTML files.

No grouping or plotting logic lives here.

Package Location: src/fars/reports/generators.py

Usage::

    from pathlib import Path
    from fars.reports.generators import ReportGenerator

    gen = ReportGenerator(
        data_dir=Path("data"),
        output_dir=Path("reports"),
    )
    gen.summary_report([2013, 2014, 2015])
    written, failed = gen.state_map_reports([16, 41, 53], 2013)
    # Writes:
    #   reports/fars_summary_2013-2015.csv
    #   reports/fars_map_16_2013.html
    #   reports/fars_map_41_2013.html
    #   reports/fars_map_53_2013.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import pandas as pd

from ..data.reader import PathLike, coerce_year
from ..analysis.summary import MONTH_COL
from ..data.summary import fars_summarize_years
from .maps import fars_map_state

log = logging.getLogger(__name__)


class ReportGenerator:
    """
    Generates and saves FARS summary tables and state maps.

    Responsibilities
    ----------------
    - Delegate all file reading to ``fars.data``.
    - Delegate figure construction to ``fars_map_state``.
    - Write the results to *output_dir*, creating it on first use.

    Args:
        data_dir: Directory holding the ``accident_<year>.csv.bz2`` files.
            ``None`` reads from the working directory.
        output_dir: Directory the report files are written to.
    """

    def __init__(self, data_dir: Optional[PathLike], output_dir: PathLike) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else None
        self.output_dir = Path(output_dir)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def summary_report(self, years: Iterable[Any]) -> tuple[pd.DataFrame, Path]:
        """
        Summarize *years* and write the table as CSV.

        The file is named after the earliest and latest year that loaded,
        e.g. ``fars_summary_2013-2015.csv``.  Unloadable years are skipped
        with a warning, as in ``fars_summarize_years``; when none loads the
        file is ``fars_summary_NA.csv``.

        Args:
            years: Non-empty sequence of data years.

        Returns:
            ``(summary, out_path)``.

        Raises:
            ValueError: If *years* is empty.
        """
        years = list(years)
        if not years:
            raise ValueError("At least one year is required.")

        summary = fars_summarize_years(years, data_dir=self.data_dir)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        out_path = self.output_dir / _summary_filename(summary)
        summary.to_csv(out_path, index=False)
        log.info(f"Summary saved → {out_path}", extra={"path": str(out_path)})
        return summary, out_path

    def state_map_report(self, state_id: Any, year: Any) -> Optional[Path]:
        """
        Draw one state's map and write it as standalone HTML.

        Args:
            state_id: FARS state code.
            year: Data year.

        Returns:
            Path written, or ``None`` if the state had nothing to plot.

        Raises:
            FarsFileNotFoundError: If the year's file does not exist.
            InvalidStateError: If *state_id* is absent from that year.
        """
        fig = fars_map_state(state_id, year, data_dir=self.data_dir)
        if fig is None:
            return None

        self.output_dir.mkdir(parents=True, exist_ok=True)
        out_path = self.output_dir / f"fars_map_{int(state_id)}_{coerce_year(year)}.html"
        fig.write_html(str(out_path))
        log.info(f"Map saved → {out_path}", extra={"path": str(out_path)})
        return out_path

    def state_map_reports(
        self,
        state_ids: Iterable[Any],
        year: Any,
    ) -> tuple[Dict[Any, Optional[Path]], Dict[Any, str]]:
        """
        Run ``state_map_report`` for several states.

        Errors for individual states are caught and logged so that a bad
        state code does not prevent the other maps from being saved.  A
        state with nothing to plot is not an error and is kept apart from
        the failures.

        Args:
            state_ids: FARS state codes.
            year: Data year shared by every map.

        Returns:
            ``(written, failed)``.  *written* maps each state that ran to
            its HTML path, or ``None`` when it had nothing to plot.
            *failed* maps each state that raised to the error message.
        """
        written: Dict[Any, Optional[Path]] = {}
        failed: Dict[Any, str] = {}
        for state_id in state_ids:
            try:
                written[state_id] = self.state_map_report(state_id, year)
            except Exception as exc:
                log.warning(
                    f"[{year}] State {state_id} map FAILED: {exc}",
                    extra={"state": str(state_id), "year": str(year)},
                )
                failed[state_id] = str(exc)
        return written, failed


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------

def _summary_filename(summary: pd.DataFrame) -> str:
    loaded = [c for c in summary.columns if c != MONTH_COL]
    if not loaded:
        return "fars_summary_NA.csv"
    first, last = min(loaded), max(loaded)
    if first == last:
        return f"fars_summary_{first}.csv"
    return f"fars_summary_{first}-{last}.csv"
