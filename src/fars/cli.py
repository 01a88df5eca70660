"""
FARS Command-Line Interface

Exposes two subcommands:

    fars summarize --years 2013 2014 2015 [--data-dir D] [--output-dir O]
    fars map       --state 16 [41 ...] --year 2013 [--data-dir D] [--output-dir O]

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .data.summary import fars_summarize_years
from .reports.generators import ReportGenerator
from .utils.logging import configure_logging


# ===========================================================================
# Shared helpers
# ===========================================================================

def _resolve_data_dir(raw: Optional[str]) -> Optional[Path]:
    """Validate ``--data-dir``; ``None`` means the working directory.

    Raises:
        SystemExit: If the directory does not exist.
    """
    if raw is None:
        return None
    data_dir = Path(raw).expanduser()
    if not data_dir.is_dir():
        _die(f"Data directory not found: {data_dir}")
    return data_dir


def _die(message: str) -> None:
    """Print an error message and exit with status 1."""
    print(f"\nError: {message}", file=sys.stderr)
    sys.exit(1)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_summarize(args: argparse.Namespace) -> None:
    """Print the month-by-year summary, optionally saving it as CSV.

    Args:
        args: Parsed CLI arguments.  Required field: ``args.years``.
    """
    data_dir = _resolve_data_dir(args.data_dir)

    if args.output_dir:
        gen = ReportGenerator(data_dir=data_dir, output_dir=Path(args.output_dir))
        summary, out_path = gen.summary_report(args.years)
        print(f"Saved: {out_path}")
    else:
        summary = fars_summarize_years(args.years, data_dir=data_dir)

    if summary.empty:
        print("No data loaded for the requested years.")
        return

    with pd.option_context("display.max_columns", None, "display.width", 120):
        print(summary.to_string(index=False))


def handle_map(args: argparse.Namespace) -> None:
    """Write one HTML accident map per requested state.

    A single state surfaces its error and exits 1; with several states,
    failures are logged per state and the exit status is 1 if any failed.
    A state with nothing to plot is reported but is not a failure.

    Args:
        args: Parsed CLI arguments.  Required fields: ``args.state``,
            ``args.year``.
    """
    data_dir = _resolve_data_dir(args.data_dir)
    gen = ReportGenerator(data_dir=data_dir, output_dir=Path(args.output_dir))

    if len(args.state) == 1:
        state_id = args.state[0]
        try:
            out_path = gen.state_map_report(state_id, args.year)
        except (FileNotFoundError, ValueError) as exc:
            if args.verbose:
                traceback.print_exc()
            _die(str(exc))
        if out_path is None:
            print(f"State {state_id}: no accidents to plot.")
        else:
            print(f"Saved: {out_path}")
        return

    written, failed = gen.state_map_reports(args.state, args.year)
    for state_id, out_path in written.items():
        print(f"State {state_id}: {out_path if out_path else 'no accidents to plot.'}")
    for state_id, message in failed.items():
        print(f"State {state_id}: FAILED: {message}", file=sys.stderr)
    if failed:
        sys.exit(1)


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System helpers\n"
            "Monthly accident summaries and per-state accident maps."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory holding accident_<year>.csv.bz2 files (default: cwd).",
    )
    common.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    common.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )
    common.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Print full tracebacks for errors.",
    )

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        parents=[common],
        help="Count accidents per month for one or more years.",
        description=(
            "Build a month-by-year accident count table.\n\n"
            "Years whose file is missing are skipped with a warning."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        type=int,
        metavar="YYYY",
        help="Data years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--output-dir",
        default=None,
        metavar="DIR",
        help="Also write the table as CSV into this directory.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        parents=[common],
        help="Plot accident locations for one or more states.",
        description=(
            "Draw accident locations on a state outline map and save them\n"
            "as standalone HTML files named fars_map_<state>_<year>.html."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_map.add_argument(
        "--state",
        required=True,
        nargs="+",
        type=int,
        metavar="CODE",
        help="FARS state code(s), e.g. --state 16 (Idaho)",
    )
    p_map.add_argument(
        "--year",
        required=True,
        type=int,
        metavar="YYYY",
        help="Data year.",
    )
    p_map.add_argument(
        "--output-dir",
        default=".",
        metavar="DIR",
        help="Directory the HTML files are written to (default: cwd).",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(args.log_level, json_format=args.log_json)
    args.func(args)


if __name__ == "__main__":
    main()
