"""
FARS State Map Report (Imperative Shell)

Loads one year of data, filters it to one state, cleans the coordinates
through the functional core and renders the map.  The figure is shown in
the browser, written to HTML, or both.

Package Location: src/fars/reports/maps.py

Error policy:
    Unlike the multi-year summary there is no fallback for a single
    state/year request: ``FileResolutionError`` and ``InvalidRegionError``
    propagate to the caller unmodified.  A state with nothing to plot is
    not an error; it is logged at WARNING (visible without any logging
    setup) and ``None`` is returned.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

import plotly.graph_objects as go

from ..analysis.states import (
    coordinate_bounds,
    filter_state,
    mask_coordinate_sentinels,
    state_label,
    valid_points,
    validate_state,
)
from ..data.files import load_file, resolve_filename
from ..plotting.state_map import plot_state_map
from ..utils.numbers import coerce_int

logger = logging.getLogger(__name__)


def map_state(
    state_num: Any,
    year: Any,
    data_dir: Optional[Union[str, Path]] = None,
    output_path: Optional[Union[str, Path]] = None,
    show: bool = True,
) -> Optional[go.Figure]:
    """
    Plot the accident locations of one state in one year.

    Args:
        state_num: FARS state code (numeric-like, e.g. ``25`` or ``"25"``).
        year: Four-digit year (numeric-like).
        data_dir: Optional directory overriding the bundled data directory.
        output_path: When given, the figure is written there as HTML.
        show: Call ``fig.show()`` after building the figure.

    Returns:
        The figure, or ``None`` when the state has no plottable accidents.

    Raises:
        FileResolutionError: If the year's file does not exist.
        InvalidRegionError: If the state does not occur in that year.
    """
    path = resolve_filename(year, data_dir)
    data = load_file(path)
    state = validate_state(data, state_num)

    subset = filter_state(data, state)
    if subset.empty:
        logger.warning("no accidents to plot", extra={"state": state, "year": str(year)})
        return None

    subset = mask_coordinate_sentinels(subset)
    points = valid_points(subset)
    bounds = coordinate_bounds(subset)
    if points.empty or bounds is None:
        logger.warning("no accidents to plot", extra={"state": state, "year": str(year)})
        return None

    n_missing = len(subset) - len(points)
    if n_missing:
        logger.info(
            f"{n_missing} of {len(subset)} accidents have no usable coordinates",
            extra={"state": state, "year": str(year)},
        )

    title = (
        f"{state_label(state)} - Fatal Accidents {coerce_int(year)} "
        f"(n={len(points)})"
    )
    fig = plot_state_map(points, bounds, title=title)

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(output_path))
        logger.info(f"Map saved -> {output_path}", extra={"path": str(output_path)})

    if show:
        fig.show()

    return fig
