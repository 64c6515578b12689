"""
FARS State Filtering and Coordinate Sanitization (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/fars/analysis/coordinates.py

Sentinel Rule:
    FARS encodes an unknown location with out-of-range values rather than
    blanks.  A ``LONGITUD`` above 900 or a ``LATITUDE`` above 90 is replaced
    with NaN before any bounds are computed, so sentinel rows never stretch
    the map extent.  Each axis is sanitized independently: a row with a
    sentinel longitude keeps its latitude for the latitude range, and
    vice versa.  Only rows with both coordinates present are plotted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from .schema import (
    LATITUDE,
    LATITUDE_SENTINEL,
    LONGITUDE,
    LONGITUDE_SENTINEL,
    STATE,
    validate_columns,
)


class InvalidStateError(ValueError):
    """
    Raised when a state number does not occur in the loaded accident data.

    Attributes:
        state_num: The offending state number (after ``int()`` coercion).
    """

    def __init__(self, state_num: int):
        self.state_num = state_num
        super().__init__(f"invalid STATE number: {state_num}")


@dataclass(frozen=True)
class MapBounds:
    """Inclusive latitude/longitude extent of the plottable points."""

    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def filter_state(df: pd.DataFrame, state_num: int) -> pd.DataFrame:
    """
    Return the accident rows recorded for one state.

    Args:
        df: Accident DataFrame with a ``STATE`` column.
        state_num: State code; coerced with ``int()``.

    Returns:
        Copy of the matching rows (may be empty).

    Raises:
        InvalidStateError: If *state_num* is not among the distinct
            ``STATE`` values of *df*.
        MissingColumnsError: If *df* has no ``STATE`` column.
    """
    validate_columns(df, [STATE])
    state_num = int(state_num)

    if state_num not in set(df[STATE].dropna().unique()):
        raise InvalidStateError(state_num)

    mask = df[STATE].eq(state_num).fillna(False).astype(bool)
    return df.loc[mask].copy()


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN.

    Args:
        df: DataFrame with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        Copy of *df* where ``LONGITUD > 900`` and ``LATITUDE > 90`` are NaN.

    Raises:
        MissingColumnsError: If either coordinate column is absent.
    """
    validate_columns(df, [LONGITUDE, LATITUDE])
    out = df.copy()
    lon = out[LONGITUDE].astype('float64')
    lat = out[LATITUDE].astype('float64')
    out[LONGITUDE] = np.where(lon > LONGITUDE_SENTINEL, np.nan, lon)
    out[LATITUDE] = np.where(lat > LATITUDE_SENTINEL, np.nan, lat)
    return out


def coordinate_bounds(df: pd.DataFrame) -> Optional[MapBounds]:
    """
    Compute the plot extent from non-missing coordinates.

    Latitude and longitude ranges are taken independently, each ignoring
    its own missing values.  Call on sanitized data.

    Returns:
        ``MapBounds``, or ``None`` if either axis has no usable values.
    """
    lat = df[LATITUDE].dropna()
    lon = df[LONGITUDE].dropna()
    if lat.empty or lon.empty:
        return None
    return MapBounds(
        lat_min=float(lat.min()),
        lat_max=float(lat.max()),
        lon_min=float(lon.min()),
        lon_max=float(lon.max()),
    )


def plottable_points(df: pd.DataFrame) -> pd.DataFrame:
    """Rows of sanitized *df* that have both coordinates present."""
    return df.dropna(subset=[LONGITUDE, LATITUDE])
