"""
FARS State Accident Map (Functional Core)

Pure function - no file I/O, no side effects.
Input: a DataFrame of already-masked coordinates + the coordinate ranges.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Frame:
    The base map draws country and state outlines and is cropped to the
    longitude / latitude ranges of the valid points, padded by
    ``pad_frac`` of each span (with a small floor so a single accident
    still yields a readable frame).
"""

from __future__ import annotations

from typing import Tuple

import pandas as pd
import plotly.graph_objects as go

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_MIN_PAD_DEG: float = 0.25

_MARKER_STYLE = dict(size=3, color="black", opacity=0.8)

_GEO_STYLE = dict(
    projection_type="mercator",
    resolution=50,
    showland=True,
    landcolor="rgb(245, 245, 245)",
    showlakes=True,
    lakecolor="rgb(220, 235, 250)",
    showcountries=True,
    countrycolor="gray",
    showsubunits=True,
    subunitcolor="gray",
    subunitwidth=0.8,
    showcoastlines=True,
    coastlinecolor="gray",
)

Bounds = Tuple[Tuple[float, float], Tuple[float, float]]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    points: pd.DataFrame,
    bounds: Bounds,
    title: str,
    pad_frac: float = 0.05,
    height: int = 650,
) -> go.Figure:
    """
    Build a geographic scatter plot of accident locations.

    Args:
        points: DataFrame with float ``LONGITUD`` and ``LATITUDE`` columns.
            Rows with a ``NaN`` in either column are not plotted.
        bounds: ``((lon_min, lon_max), (lat_min, lat_max))`` used to crop
            the base map.
        title: Figure title.
        pad_frac: Fraction of each span added on both sides of the frame.
        height: Figure height in pixels.

    Returns:
        ``plotly.graph_objects.Figure`` with a single ``Scattergeo`` trace.

    Raises:
        ValueError: If ``points`` is missing required columns.
    """
    _validate_columns(points, required=["LONGITUD", "LATITUDE"])

    df = points.dropna(subset=["LONGITUD", "LATITUDE"])
    (lon_min, lon_max), (lat_min, lat_max) = bounds
    lon_range = _pad_range(lon_min, lon_max, pad_frac)
    lat_range = _pad_range(lat_min, lat_max, pad_frac)

    fig = go.Figure(
        go.Scattergeo(
            lon=df["LONGITUD"],
            lat=df["LATITUDE"],
            mode="markers",
            marker=_MARKER_STYLE,
            name="Fatal accident",
            hovertemplate="lat %{lat:.4f}<br>lon %{lon:.4f}<extra></extra>",
        )
    )
    fig.update_geos(
        lonaxis_range=list(lon_range),
        lataxis_range=list(lat_range),
        **_GEO_STYLE,
    )
    fig.update_layout(
        title=dict(text=title, x=0.5),
        height=int(height),
        margin=dict(l=0, r=0, t=48, b=0),
        showlegend=False,
        template="plotly_white",
    )
    return fig


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _pad_range(lo: float, hi: float, pad_frac: float) -> Tuple[float, float]:
    pad = max((hi - lo) * pad_frac, _MIN_PAD_DEG)
    return lo - pad, hi + pad


def _validate_columns(df: pd.DataFrame, required: list[str]) -> None:
    """
    Raise ValueError if any required columns are absent.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(
            f"points is missing required columns: {missing}"
        )
