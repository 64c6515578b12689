"""
FARS Data Reader (Imperative Shell)

Maps a year onto the canonical FARS file name and loads one accident
file into a DataFrame.

Package Location: src/fars/data/reader.py

File naming:
    Yearly files are named ``accident_<year>.csv.bz2`` and are looked up
    in the current working directory unless a ``data_dir`` is supplied.
    pandas infers bzip2 compression from the suffix, so uncompressed
    ``.csv`` files load through the same path.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from ..analysis.schema import apply_accident_schema

logger = logging.getLogger(__name__)

_FILENAME_TEMPLATE: str = "accident_{year:d}.csv.bz2"

PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year) -> str:
    """
    Build the canonical FARS file name for *year*.

    The year is coerced with ``int()`` so ``2013``, ``2013.0`` and
    ``"2013"`` all produce the same name.  Fractional years are
    truncated, never rejected.

    Args:
        year: Calendar year, any value ``int()`` accepts.

    Returns:
        File name such as ``'accident_2013.csv.bz2'``.

    Raises:
        ValueError, TypeError: If *year* cannot be converted by ``int()``.

    Example:
        >>> make_filename(2013.0)
        'accident_2013.csv.bz2'
    """
    return _FILENAME_TEMPLATE.format(year=coerce_year(year))


def resolve_path(filename: PathLike, data_dir: Optional[PathLike] = None) -> Path:
    """
    Resolve *filename* against *data_dir*.

    Absolute file names are returned unchanged.  Relative names are joined
    onto *data_dir* when one is given, otherwise left relative to the
    current working directory.
    """
    path = Path(filename)
    if data_dir is not None and not path.is_absolute():
        path = Path(data_dir) / path
    return path


def fars_read(
    filename: PathLike,
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Read one FARS accident CSV file into a DataFrame.

    Columns and their order come from the file header.  The four known
    accident fields (``MONTH``, ``STATE``, ``LONGITUD``, ``LATITUDE``) are
    coerced to their schema dtypes; all other columns are passed through.

    Args:
        filename: Path to the file, optionally bzip2 compressed.
        data_dir: Optional directory relative file names are resolved
            against.  Defaults to the current working directory.

    Returns:
        DataFrame with one row per accident record.

    Raises:
        FileNotFoundError: If the file does not exist.  The message names
            *filename* exactly as given.
        pandas.errors.ParserError: If the file is not valid CSV.
    """
    path = resolve_path(filename, data_dir)
    if not path.exists():
        where = f" in '{data_dir}'" if data_dir is not None else ""
        raise FileNotFoundError(f"file '{filename}' does not exist{where}")

    logger.debug("Reading %s", path)
    df = pd.read_csv(path, low_memory=False)
    logger.debug("Read %d rows x %d columns from %s", len(df), df.shape[1], path.name)

    return apply_accident_schema(df)


def coerce_year(year) -> int:
    """``int()`` with a string fallback for values like ``'2013.0'``."""
    if isinstance(year, str):
        try:
            return int(year)
        except ValueError:
            return int(float(year))
    return int(year)
