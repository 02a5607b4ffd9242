"""
FARS State Filtering and Coordinate Cleaning (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/fars/analysis/states.py

Coordinate sentinels:
    FARS encodes unknown positions with out-of-range placeholders such as
    ``99.9999`` / ``999.9999`` (and ``88.8888`` / ``888.8888`` for "not
    available").  Any ``LONGITUD`` above 900 or ``LATITUDE`` above 90 is
    therefore treated as missing and replaced with ``NaN``; it is never
    replaced with a default position.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import pandas as pd

from ..utils.numbers import coerce_int

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_LON_SENTINEL: float = 900.0
_LAT_SENTINEL: float = 90.0

# FARS / FIPS state codes (3, 7, 14, 43 and 52 are unused)
STATE_NAMES: Dict[int, str] = {
    1: "Alabama", 2: "Alaska", 4: "Arizona", 5: "Arkansas",
    6: "California", 8: "Colorado", 9: "Connecticut", 10: "Delaware",
    11: "District of Columbia", 12: "Florida", 13: "Georgia", 15: "Hawaii",
    16: "Idaho", 17: "Illinois", 18: "Indiana", 19: "Iowa", 20: "Kansas",
    21: "Kentucky", 22: "Louisiana", 23: "Maine", 24: "Maryland",
    25: "Massachusetts", 26: "Michigan", 27: "Minnesota", 28: "Mississippi",
    29: "Missouri", 30: "Montana", 31: "Nebraska", 32: "Nevada",
    33: "New Hampshire", 34: "New Jersey", 35: "New Mexico", 36: "New York",
    37: "North Carolina", 38: "North Dakota", 39: "Ohio", 40: "Oklahoma",
    41: "Oregon", 42: "Pennsylvania", 44: "Rhode Island",
    45: "South Carolina", 46: "South Dakota", 47: "Tennessee", 48: "Texas",
    49: "Utah", 50: "Vermont", 51: "Virginia", 53: "Washington",
    54: "West Virginia", 55: "Wisconsin", 56: "Wyoming",
}


class InvalidRegionError(ValueError):
    """
    Raised when a state code does not occur in the loaded year's data.

    Attributes:
        state: The requested state code (as given by the caller).
    """

    def __init__(self, state: Any):
        self.state = state
        super().__init__(f"invalid STATE number: {state}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def state_label(state_num: int) -> str:
    """Return the state's name, or ``"State <n>"`` for unknown codes."""
    return STATE_NAMES.get(state_num, f"State {state_num}")


def validate_state(df: pd.DataFrame, state: Any) -> int:
    """
    Coerce *state* to ``int`` and check that it occurs in ``df['STATE']``.

    Raises:
        InvalidRegionError: If *state* is not numeric or not present.
    """
    try:
        state_num = coerce_int(state)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidRegionError(state) from exc

    if state_num not in set(df["STATE"].dropna().astype(int).unique()):
        raise InvalidRegionError(state_num)
    return state_num


def filter_state(df: pd.DataFrame, state_num: int) -> pd.DataFrame:
    """Return a copy of the rows whose ``STATE`` equals *state_num*."""
    return df.loc[df["STATE"] == state_num].copy()


def mask_coordinate_sentinels(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with ``NaN``.

    Longitude and latitude are masked independently: a row may keep a
    valid latitude while its longitude becomes ``NaN``.

    Args:
        df: DataFrame with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        Copy of *df* with float ``LONGITUD`` / ``LATITUDE`` columns.
    """
    out = df.copy()
    lon = pd.to_numeric(out["LONGITUD"], errors="coerce").astype(float)
    lat = pd.to_numeric(out["LATITUDE"], errors="coerce").astype(float)
    out["LONGITUD"] = lon.where(lon <= _LON_SENTINEL, np.nan)
    out["LATITUDE"] = lat.where(lat <= _LAT_SENTINEL, np.nan)
    return out


def valid_points(df: pd.DataFrame) -> pd.DataFrame:
    """Rows of a masked frame that have both a longitude and a latitude."""
    return df.dropna(subset=["LONGITUD", "LATITUDE"])


def coordinate_bounds(
    df: pd.DataFrame,
) -> Optional[Tuple[Tuple[float, float], Tuple[float, float]]]:
    """
    Compute ``((lon_min, lon_max), (lat_min, lat_max))`` ignoring ``NaN``.

    Each axis is ranged over all of its own non-missing values, so a row
    with only a valid latitude still widens the latitude range.

    Returns:
        The two ranges, or ``None`` when either axis has no valid value.
    """
    lon = df["LONGITUD"].dropna()
    lat = df["LATITUDE"].dropna()
    if lon.empty or lat.empty:
        return None
    return (
        (float(lon.min()), float(lon.max())),
        (float(lat.min()), float(lat.max())),
    )
