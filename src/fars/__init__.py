"""
FARS - Fatality Analysis Reporting System toolkit

Loads yearly FARS accident files, summarizes accidents by month and
year, and maps accident locations for a state, following the
Functional Core, Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file resolution, loading, multi-year reads)
- analysis/ : Functional Core (pivoting, state filtering, coordinate cleaning)
- plotting/ : Functional Core (plotly figure builders)
- reports/  : Imperative Shell (summary and map orchestration, exports)
- extdata/  : bundled accident_<year>.csv.bz2 files
"""

__version__ = "0.1.0"

from .analysis.states import InvalidRegionError
from .data import (
    FileResolutionError,
    InvalidYearWarning,
    YearResult,
    available_years,
    load_file,
    make_filename,
    read_year_results,
    read_years,
    resolve_filename,
)
from .reports import map_state, summarize_years

__all__ = [
    # Errors
    'FileResolutionError',
    'InvalidRegionError',
    'InvalidYearWarning',
    # Data
    'YearResult',
    'available_years',
    'load_file',
    'make_filename',
    'read_year_results',
    'read_years',
    'resolve_filename',
    # Reports
    'map_state',
    'summarize_years',
]
