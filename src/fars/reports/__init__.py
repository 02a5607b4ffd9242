"""
FARS Reports Package (Imperative Shell)

Orchestrates data reads, the functional core and output.  No analysis
logic lives here.

Modules:
    summary: summarize_years() - month x year count table, optional CSV.
    maps:    map_state() - state accident map, shown and/or saved as HTML.
"""

from .maps import map_state
from .summary import summarize_years

__all__ = [
    'map_state',
    'summarize_years',
]
