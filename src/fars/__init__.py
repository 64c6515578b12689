"""
FARS - Fatality Analysis Reporting System accident toolkit

A small Python package for loading yearly FARS accident files,
summarising accident counts by month and year, and mapping accident
locations for a single state.

Structure:
- data/     : Imperative Shell (file naming, CSV loading)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : end-to-end summaries and maps
"""

from .data import (
    fars_read,
    make_filename,
    fars_read_years,
    Loaded,
    Failed,
    ReadYearsResult,
    InvalidYearWarning,
)
from .analysis import MissingColumnsError, InvalidStateError
from .reports import fars_summarize_years, fars_map_state

__version__ = "0.1.0"

__all__ = [
    'fars_read',
    'make_filename',
    'fars_read_years',
    'fars_summarize_years',
    'fars_map_state',
    'Loaded',
    'Failed',
    'ReadYearsResult',
    'InvalidYearWarning',
    'MissingColumnsError',
    'InvalidStateError',
]
