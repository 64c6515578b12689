"""
FARS Accident Record Schema (Functional Core)

Pure functions only. No I/O.

Package Location: src/fars/analysis/schema.py

FARS accident files carry several dozen columns whose exact set varies
between releases.  Only four of them matter to this package; they are
declared here with the pandas dtype each is coerced to after loading.
Every other column passes through with whatever dtype ``read_csv``
inferred.

Coordinate sentinels:
    The source data records unknown coordinates as out-of-range values
    (``LONGITUD`` of 999.9999, ``LATITUDE`` of 99.9999 and similar).
    Anything above ``LONGITUDE_SENTINEL`` / ``LATITUDE_SENTINEL`` is
    treated as missing by ``coordinates.sanitize_coordinates``.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

import pandas as pd

# ---------------------------------------------------------------------------
# Column names
# ---------------------------------------------------------------------------

MONTH: str = 'MONTH'
STATE: str = 'STATE'
LONGITUDE: str = 'LONGITUD'
LATITUDE: str = 'LATITUDE'
YEAR: str = 'year'  # added during multi-year loading, never in the raw file

# Known accident record fields and their post-load dtypes
ACCIDENT_COLUMNS: Dict[str, str] = {
    MONTH:     'Int64',
    STATE:     'Int64',
    LONGITUDE: 'float64',
    LATITUDE:  'float64',
}

LONGITUDE_SENTINEL: float = 900.0
LATITUDE_SENTINEL: float = 90.0


class MissingColumnsError(ValueError):
    """
    Raised when a DataFrame lacks columns an operation depends on.

    Attributes:
        missing: Names of the absent columns, in the order requested.
    """

    def __init__(self, missing: List[str], context: str = 'accident data'):
        self.missing = list(missing)
        super().__init__(
            f"{context} is missing required columns: {self.missing}"
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_columns(
    df: pd.DataFrame,
    required: Iterable[str],
    context: str = 'accident data',
) -> None:
    """
    Raise MissingColumnsError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: Column names that must be present.
        context: Label used in the error message.

    Raises:
        MissingColumnsError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise MissingColumnsError(missing, context)


def apply_accident_schema(df: pd.DataFrame) -> pd.DataFrame:
    """
    Coerce the known accident columns to their declared dtypes.

    Columns listed in ``ACCIDENT_COLUMNS`` that are present are converted
    with ``pd.to_numeric``; unparseable cells become missing rather than
    failing the load.  Integer columns also treat non-integral values
    (a ``MONTH`` of 1.5) as missing.  Absent known columns are left
    absent, so callers that need one must call ``validate_columns``
    themselves.

    Args:
        df: Raw DataFrame as returned by ``pd.read_csv``.

    Returns:
        A copy of *df* with known columns coerced.  Column order and any
        unknown columns are preserved.
    """
    out = df.copy()
    for col, dtype in ACCIDENT_COLUMNS.items():
        if col in out.columns:
            values = pd.to_numeric(out[col], errors='coerce')
            if dtype == 'Int64':
                values = values.where(values.isna() | (values % 1 == 0))
            out[col] = values.astype(dtype)
    return out
