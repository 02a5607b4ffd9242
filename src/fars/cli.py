"""
FARS Command-Line Interface

Exposes three subcommands:

    fars years                                   List years with a data file
    fars summarize --years <Y> [<Y> ...] [...]   Month x year accident counts
    fars map --state <N> --year <Y> [...]        Map one state's accidents

The package must be installed (``pip install -e .``) for the ``fars``
entry point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .analysis.states import InvalidRegionError
from .data.files import FileResolutionError, available_years, get_data_dir
from .reports.maps import map_state
from .reports.summary import summarize_years
from .utils.logging import configure_logging


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\nError: {message}", file=sys.stderr)
    sys.exit(1)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_years(args: argparse.Namespace) -> None:
    """Print the years that have a data file."""
    years = available_years(args.data_dir)
    if not years:
        _die(f"No accident_<year>.csv.bz2 files found in {get_data_dir(args.data_dir)}")
    print(" ".join(str(y) for y in years))


def handle_summarize(args: argparse.Namespace) -> None:
    """Print (and optionally save) the month x year count table.

    Args:
        args: Parsed CLI arguments.  Required field: ``args.years``.
    """
    table = summarize_years(
        args.years,
        data_dir=args.data_dir,
        zero_fill=args.zero_fill,
        include_skipped=args.include_skipped,
    )
    if table.empty or table.isna().all().all():
        _die(f"None of the requested years could be read: {', '.join(args.years)}")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(output_path)

    with pd.option_context("display.max_columns", None, "display.width", 120):
        print(table.to_string())
    if args.output:
        print(f"\nSaved -> {args.output}")


def handle_map(args: argparse.Namespace) -> None:
    """Render the accident map for one state and year.

    Args:
        args: Parsed CLI arguments.  Required fields: ``args.state``,
            ``args.year``.
    """
    try:
        fig = map_state(
            args.state,
            args.year,
            data_dir=args.data_dir,
            output_path=args.output,
            show=not args.no_show,
        )
    except (FileResolutionError, InvalidRegionError) as exc:
        if args.verbose:
            traceback.print_exc()
        _die(str(exc))

    if fig is None:
        print(f"No accidents to plot for state {args.state} in {args.year}.")
    elif args.output:
        print(f"Saved -> {args.output}")


# ===========================================================================
# Parser
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fars",
        description="Summarize and map FARS fatal accident data.",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory holding accident_<year>.csv.bz2 files "
             "(default: the bundled sample data).",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Log at DEBUG level and print tracebacks on errors.",
    )
    subs = parser.add_subparsers(dest="command", required=True)

    # ------------------------------------------------------------------
    # years
    # ------------------------------------------------------------------
    p_years = subs.add_parser("years", help="List years with a data file.")
    p_years.set_defaults(func=handle_years)

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YYYY",
        help="Years to summarize, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--zero-fill",
        action="store_true",
        default=False,
        help="Show months without accidents as 0 instead of <NA>.",
    )
    p_sum.add_argument(
        "--include-skipped",
        action="store_true",
        default=False,
        help="Keep an all-<NA> column for years that could not be read.",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="CSV",
        help="Also write the table to this CSV file.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Map accident locations for one state and year.",
    )
    p_map.add_argument("--state", required=True, metavar="N", help="FARS state code.")
    p_map.add_argument("--year", required=True, metavar="YYYY", help="Data year.")
    p_map.add_argument(
        "--output",
        default=None,
        metavar="HTML",
        help="Write the map to this HTML file.",
    )
    p_map.add_argument(
        "--no-show",
        action="store_true",
        default=False,
        help="Do not open the map in a browser.",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    Registered as the ``fars`` console script in ``pyproject.toml``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(
        json_output=args.log_json,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )
    args.func(args)


if __name__ == "__main__":
    main()
