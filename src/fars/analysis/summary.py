"""
FARS Month/Year Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input: per-year ``[MONTH, year]`` DataFrames.  Output: a wide count table.

Package Location: src/fars/analysis/summary.py

Pivot rule:
    The per-year tables are concatenated first and pivoted second.  A year
    that contributed no rows therefore has no ``(year, MONTH)`` groups and
    never becomes a column; there is no separate enumeration of the
    requested years.  Month/year combinations absent from the data are
    ``<NA>`` in the result, not zero.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from .schema import MONTH, YEAR, validate_columns


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def summarize_month_counts(frames: Iterable[pd.DataFrame]) -> pd.DataFrame:
    """
    Count accidents per month and year and spread the years into columns.

    Args:
        frames: DataFrames each holding at least ``MONTH`` and ``year``
            columns (as produced by ``fars_read_years``).  Empty iterables
            are allowed.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending, only months present in
        the data) with one ``Int64`` column per year (ascending).  The
        column axis is named ``year``.  When no rows are supplied the
        result is an empty frame with the same index and column names.

    Raises:
        MissingColumnsError: If a frame lacks ``MONTH`` or ``year``.

    Example:
        >>> summarize_month_counts([df_2013, df_2014])
        year   2013  2014
        MONTH
        1        ...   ...
        2        ...   ...

    (Counts shown as ``...``; actual values depend on the input rows.)
    """
    frames = list(frames)
    for df in frames:
        validate_columns(df, [MONTH, YEAR], context='year table')

    if not frames:
        return _empty_summary()

    combined = pd.concat(frames, ignore_index=True)
    counts = combined.groupby([YEAR, MONTH]).size()

    if counts.empty:
        return _empty_summary()

    wide = counts.unstack(YEAR).sort_index().sort_index(axis=1)
    return wide.astype('Int64')


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _empty_summary() -> pd.DataFrame:
    empty = pd.DataFrame(index=pd.Index([], name=MONTH, dtype='Int64'))
    empty.columns.name = YEAR
    return empty
