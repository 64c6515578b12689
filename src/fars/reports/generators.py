"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: resolves years → file names, calls the data
package to load accident files, calls the functional core to summarise or
sanitize, calls plotting functions to build figures, writes CSV/HTML.

Package Location: src/fars/reports/generators.py

Usage::

    from pathlib import Path
    from fars.reports.generators import ReportGenerator

    gen = ReportGenerator(
        data_dir=Path("fars_data"),
        output_dir=Path("reports"),
    )
    gen.save_summary([2013, 2014, 2015])
    gen.save_state_map(1, 2014)
    # Writes:
    #   reports/summary_2013-2015.csv
    #   reports/state_1_2014.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..data import coerce_year, fars_read, fars_read_years, make_filename
from ..analysis.summary import summarize_month_counts
from ..analysis.coordinates import (
    coordinate_bounds,
    filter_state,
    plottable_points,
    sanitize_coordinates,
)
from ..plotting.state_map import plot_state_map

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

NO_ACCIDENTS_MESSAGE = "no accidents to plot"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def fars_summarize_years(
    years: Iterable,
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Count accidents by month for each requested year.

    Years whose files cannot be loaded are logged by ``fars_read_years``
    and contribute no rows, so they have no column in the result.

    Args:
        years: Years to summarise.
        data_dir: Optional directory holding the yearly files.

    Returns:
        DataFrame indexed by ``MONTH`` with one ``Int64`` count column per
        successfully loaded year, both axes ascending.

    Example::

        >>> fars_summarize_years([2013, 2014])
        year   2013  2014
        MONTH
        1        ...   ...
        ...

    (Counts shown as ``...``; actual values depend on the loaded files.)
    """
    result = fars_read_years(years, data_dir=data_dir)
    return summarize_month_counts(result.frames())


def fars_map_state(
    state_num,
    year,
    data_dir: Optional[PathLike] = None,
) -> Optional[go.Figure]:
    """
    Map the accidents of one state in one year.

    Args:
        state_num: State code as used in the ``STATE`` column; coerced
            with ``int()``.
        year: Year whose accident file is loaded.
        data_dir: Optional directory holding the yearly files.

    Returns:
        ``plotly.graph_objects.Figure`` with one marker per accident that
        has both coordinates, clipped to their extent.  ``None`` (logged
        at INFO) if filtering leaves no rows; ``filter_state`` rejects
        states absent from the data first, so this only guards an empty
        filter result.

    Raises:
        FileNotFoundError: If the year's file does not exist.
        InvalidStateError: If *state_num* does not occur in the data.
    """
    year = coerce_year(year)
    data = fars_read(make_filename(year), data_dir=data_dir)
    state_num = int(state_num)

    data_sub = filter_state(data, state_num)
    if data_sub.empty:
        logger.info(
            NO_ACCIDENTS_MESSAGE,
            extra={"state": state_num, "year": year},
        )
        return None

    data_sub = sanitize_coordinates(data_sub)
    points = plottable_points(data_sub)
    logger.debug(
        "State %d, %s: %d of %d accidents have usable coordinates",
        state_num, year, len(points), len(data_sub),
    )

    return plot_state_map(
        points,
        coordinate_bounds(data_sub),
        title=f"FARS accidents – state {state_num}, {year}",
    )


class ReportGenerator:
    """
    Writes FARS summaries and state maps to an output directory.

    Args:
        data_dir: Directory holding the ``accident_<year>.csv.bz2`` files.
            ``None`` uses the current working directory.
        output_dir: Directory reports are written to; created on demand.
    """

    def __init__(
        self,
        data_dir: Optional[PathLike] = None,
        output_dir: PathLike = '.',
    ) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else None
        self.output_dir = Path(output_dir)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def save_summary(
        self,
        years: Iterable,
        filename: Optional[str] = None,
    ) -> Path:
        """
        Write the month/year summary table as CSV.

        Args:
            years: Years to summarise.
            filename: Output file name inside ``output_dir``.  Defaults to
                ``summary_<first>-<last>.csv``.

        Returns:
            Path of the written file.
        """
        years = list(years)
        summary = fars_summarize_years(years, data_dir=self.data_dir)

        if filename is None:
            filename = _summary_filename(years)
        out_path = self._prepare_output(filename)
        summary.to_csv(out_path)
        logger.info(
            "Summary saved → %s", out_path,
            extra={"years": [str(y) for y in years], "rows": len(summary)},
        )
        return out_path

    def save_state_map(
        self,
        state_num,
        year,
        filename: Optional[str] = None,
    ) -> Optional[Path]:
        """
        Write the state accident map as a standalone HTML file.

        Args:
            state_num: State code.
            year: Accident year.
            filename: Output file name inside ``output_dir``.  Defaults to
                ``state_<state_num>_<year>.html``.

        Returns:
            Path of the written file, or ``None`` if there was nothing to
            plot.

        Raises:
            FileNotFoundError: If the year's file does not exist.
            InvalidStateError: If *state_num* does not occur in the data.
        """
        fig = fars_map_state(state_num, year, data_dir=self.data_dir)
        if fig is None:
            return None

        if filename is None:
            filename = f"state_{int(state_num)}_{coerce_year(year)}.html"
        out_path = self._prepare_output(filename)
        fig.write_html(str(out_path))
        logger.info("State map saved → %s", out_path)
        return out_path

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _prepare_output(self, filename: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir / filename


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------

def _summary_filename(years: list) -> str:
    if not years:
        return "summary.csv"
    first, last = _year_label(years[0]), _year_label(years[-1])
    if first == last:
        return f"summary_{first}.csv"
    return f"summary_{first}-{last}.csv"


def _year_label(year) -> str:
    """Integer form of *year* for file names; unconvertible values as-is."""
    try:
        return str(coerce_year(year))
    except (TypeError, ValueError):
        return str(year)
