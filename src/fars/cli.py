"""
FARS Command-Line Interface

Exposes two subcommands:

    fars summarize --years 2013 2014 [...]     Accident counts by month and year
    fars map --state N --year YYYY [...]       HTML map of one state's accidents

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.  Yearly files are looked up in ``--data-dir``
(default: the current working directory).

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .analysis import InvalidStateError, MissingColumnsError
from .data import fars_read_years
from .analysis.summary import summarize_month_counts
from .reports.generators import NO_ACCIDENTS_MESSAGE, ReportGenerator
from .utils.logging import configure_logging


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\n❌  Error: {message}", file=sys.stderr)
    sys.exit(1)


def _check_data_dir(data_dir: Optional[Path]) -> None:
    """Exit early when an explicit ``--data-dir`` does not exist."""
    if data_dir is not None and not data_dir.is_dir():
        _die(f"Data directory not found: {data_dir}")


# ===========================================================================
# Subcommand handlers
# ===========================================================================

# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------

def handle_summarize(args: argparse.Namespace) -> None:
    """Print (and optionally save) the month-by-year accident count table.

    Years whose files are missing or unreadable are logged as non-fatal
    warnings; the table is built from the remaining years.

    Args:
        args: Parsed CLI arguments.
    """
    _check_data_dir(args.data_dir)

    # Invalid years are reported by the fars.data.years logger.
    result = fars_read_years(args.years, data_dir=args.data_dir)

    summary = summarize_month_counts(result.frames())
    if summary.empty:
        _die("No accident data could be loaded for the requested years.")

    with pd.option_context("display.max_columns", None, "display.width", 120):
        print(summary.to_string())

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(args.output)
        print(f"\n✅  Summary saved → {args.output}")


# ---------------------------------------------------------------------------
# map
# ---------------------------------------------------------------------------

def handle_map(args: argparse.Namespace) -> None:
    """Write the accident map for one state and year as HTML.

    Args:
        args: Parsed CLI arguments.
    """
    _check_data_dir(args.data_dir)

    gen = ReportGenerator(data_dir=args.data_dir, output_dir=args.output_dir)
    try:
        out_path = gen.save_state_map(args.state, args.year)
    except (FileNotFoundError, InvalidStateError, MissingColumnsError) as exc:
        if args.verbose:
            traceback.print_exc()
        _die(str(exc))

    if out_path is None:
        print(f"ℹ️   {NO_ACCIDENTS_MESSAGE}")
    else:
        print(f"✅  Map saved → {out_path}")


# ===========================================================================
# Parser
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fars",
        description="Summarise and map FARS fatal accident files.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON objects.",
    )
    subs = parser.add_subparsers(dest="command", required=True)

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents by month for one or more years.",
        description=(
            "Load accident_<year>.csv.bz2 for each year and print a table\n"
            "with one row per month and one column per year."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        type=int,
        metavar="YYYY",
        help="One or more years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        metavar="DIR",
        help="Directory holding the yearly files (default: cwd).",
    )
    p_sum.add_argument(
        "--output",
        type=Path,
        default=None,
        metavar="FILE",
        help="Also write the table to this CSV file.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Map the accidents of one state in one year.",
        description=(
            "Plot accident locations for a state over the US state map and\n"
            "save the figure as state_<N>_<year>.html."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_map.add_argument(
        "--state",
        required=True,
        type=int,
        metavar="N",
        help="State number as used in the STATE column.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        type=int,
        metavar="YYYY",
        help="Accident year.",
    )
    p_map.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        metavar="DIR",
        help="Directory holding the yearly files (default: cwd).",
    )
    p_map.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        metavar="DIR",
        help="Directory the HTML map is written to (default: cwd).",
    )
    p_map.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Print the full traceback on failure.",
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
    configure_logging(args.log_level, json_output=args.json_logs)
    args.func(args)


if __name__ == "__main__":
    main()
