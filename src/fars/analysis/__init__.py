"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return transformed data.

Modules:
- schema:      Known accident columns, dtype coercion, column checks
- summary:     Month/year accident count pivot
- coordinates: State filtering, sentinel coordinates, map bounds
"""

from .schema import (
    ACCIDENT_COLUMNS,
    MissingColumnsError,
    validate_columns,
    apply_accident_schema,
)

from .summary import (
    summarize_month_counts,
)

from .coordinates import (
    InvalidStateError,
    MapBounds,
    filter_state,
    sanitize_coordinates,
    coordinate_bounds,
    plottable_points,
)

__all__ = [
    # Schema
    'ACCIDENT_COLUMNS',
    'MissingColumnsError',
    'validate_columns',
    'apply_accident_schema',
    # Summary
    'summarize_month_counts',
    # Coordinates
    'InvalidStateError',
    'MapBounds',
    'filter_state',
    'sanitize_coordinates',
    'coordinate_bounds',
    'plottable_points',
]
