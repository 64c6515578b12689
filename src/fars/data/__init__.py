"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS toolkit.

Modules:
- reader: File naming convention and single-file CSV loading
- years:  Multi-year loading with per-year failure isolation
"""

from .reader import make_filename, fars_read, resolve_path, coerce_year
from .years import (
    Loaded,
    Failed,
    ReadYearsResult,
    InvalidYearWarning,
    fars_read_years,
)

__all__ = [
    # Reader
    'make_filename',
    'fars_read',
    'resolve_path',
    'coerce_year',
    # Years
    'Loaded',
    'Failed',
    'ReadYearsResult',
    'InvalidYearWarning',
    'fars_read_years',
]
