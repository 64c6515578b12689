"""
FARS Multi-Year Loader (Imperative Shell)

Loads several yearly accident files, tags each row with its year and
keeps only the columns the month/year summary needs.

Package Location: src/fars/data/years.py

Failure isolation:
    A year whose file is missing or unreadable does not abort the call.
    Its slot in the result becomes ``Failed(year, reason)`` and a matching
    ``InvalidYearWarning`` is recorded on the result (and logged).  Callers
    that concatenate the loaded tables simply skip ``Failed`` slots.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

import pandas as pd

from ..analysis.schema import MONTH, YEAR, validate_columns
from .reader import coerce_year, fars_read, make_filename

logger = logging.getLogger(__name__)

# Errors that mark a single year as invalid rather than failing the batch.
# OSError / EOFError cover corrupt or truncated bzip2 streams; TypeError
# covers years int() cannot convert and non-integral MONTH values.
_YEAR_LOAD_ERRORS = (
    FileNotFoundError,
    pd.errors.ParserError,
    ValueError,
    TypeError,
    OSError,
    EOFError,
)


class InvalidYearWarning(UserWarning):
    """
    Non-fatal notice that one requested year could not be loaded.

    Never raised by this package; instances are collected on
    ``ReadYearsResult.warnings``.

    Attributes:
        year: The year as the caller supplied it.
        reason: Text of the underlying load error.
    """

    def __init__(self, year, reason: str):
        self.year = year
        self.reason = reason
        super().__init__(f"invalid year: {year}")


@dataclass(frozen=True, eq=False)
class Loaded:
    """A year whose file loaded; ``table`` holds ``MONTH`` and ``year``."""

    year: int
    table: pd.DataFrame


@dataclass(frozen=True)
class Failed:
    """A year whose file could not be loaded."""

    year: object
    reason: str


YearTable = Union[Loaded, Failed]


@dataclass
class ReadYearsResult:
    """
    Per-year load outcomes in request order, plus collected warnings.

    Behaves as a read-only sequence of ``Loaded`` / ``Failed`` slots so
    ``result[0]`` and ``len(result)`` line up with the requested years.
    """

    tables: List[YearTable] = field(default_factory=list)
    warnings: List[InvalidYearWarning] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tables)

    def __getitem__(self, index: int) -> YearTable:
        return self.tables[index]

    def __iter__(self) -> Iterator[YearTable]:
        return iter(self.tables)

    def frames(self) -> List[pd.DataFrame]:
        """Return the tables of all ``Loaded`` slots, in order."""
        return [t.table for t in self.tables if isinstance(t, Loaded)]

    @property
    def failed_years(self) -> list:
        return [t.year for t in self.tables if isinstance(t, Failed)]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def fars_read_years(
    years: Iterable,
    data_dir: Optional[Union[str, Path]] = None,
) -> ReadYearsResult:
    """
    Load the accident files for several years.

    For every year the file ``accident_<year>.csv.bz2`` is read, a
    ``year`` column is added and the table is reduced to
    ``[MONTH, year]``.

    Args:
        years: Years to load, in the order the result should follow.
        data_dir: Optional directory holding the yearly files.

    Returns:
        ``ReadYearsResult`` with one slot per requested year.  Years that
        failed to load appear as ``Failed`` and contribute exactly one
        ``InvalidYearWarning`` each.

    Example:
        >>> result = fars_read_years([2013, 9999])
        >>> type(result[1]).__name__, result.warnings[0].year
        ('Failed', 9999)
    """
    result = ReadYearsResult()

    for year in years:
        try:
            result.tables.append(_load_year(year, data_dir))
        except _YEAR_LOAD_ERRORS as exc:
            warning = InvalidYearWarning(year, str(exc))
            logger.warning(
                "invalid year: %s", year,
                extra={"year": str(year), "reason": warning.reason},
            )
            result.tables.append(Failed(year, warning.reason))
            result.warnings.append(warning)

    return result


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _load_year(year, data_dir: Optional[Union[str, Path]]) -> Loaded:
    """Read one year's file and project it to ``[MONTH, year]``."""
    year_int = coerce_year(year)
    filename = make_filename(year_int)
    df = fars_read(filename, data_dir=data_dir)
    validate_columns(df, [MONTH], context=filename)
    return Loaded(year_int, df.assign(**{YEAR: year_int})[[MONTH, YEAR]])
