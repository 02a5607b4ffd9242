"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS toolkit.

Modules:
- files: Year -> file name resolution and CSV loading
- years: Multi-year reads with per-year skip-on-failure
"""

from .files import (
    FileResolutionError,
    available_years,
    get_data_dir,
    load_file,
    make_filename,
    resolve_filename,
)
from .years import (
    InvalidYearWarning,
    YearResult,
    read_year_results,
    read_years,
)

__all__ = [
    # Files
    'FileResolutionError',
    'available_years',
    'get_data_dir',
    'load_file',
    'make_filename',
    'resolve_filename',
    # Years
    'InvalidYearWarning',
    'YearResult',
    'read_year_results',
    'read_years',
]
