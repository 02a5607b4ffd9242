"""
FARS Analysis Package (Functional Core)

Pure transformation functions with no I/O.  All functions accept
DataFrames and return DataFrames or plain values.

Modules:
- summary: Month x year accident count pivot
- states:  State validation/filtering and coordinate sentinel masking
"""

from .summary import count_by_month

from .states import (
    STATE_NAMES,
    InvalidRegionError,
    coordinate_bounds,
    filter_state,
    mask_coordinate_sentinels,
    state_label,
    valid_points,
    validate_state,
)

__all__ = [
    # Summary
    'count_by_month',
    # States
    'STATE_NAMES',
    'InvalidRegionError',
    'coordinate_bounds',
    'filter_state',
    'mask_coordinate_sentinels',
    'state_label',
    'valid_points',
    'validate_state',
]
