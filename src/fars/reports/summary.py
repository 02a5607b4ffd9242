"""
FARS Monthly Summary Report (Imperative Shell)

Thin orchestration: reads the requested years through
``fars.data.years`` and hands the frames to the pure pivot in
``fars.analysis.summary``.  Optionally writes the table to CSV.

Package Location: src/fars/reports/summary.py

Usage::

    from fars import summarize_years

    table = summarize_years([2013, 2014, 2015])
    table = summarize_years([2013, 2016], zero_fill=True, include_skipped=True)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import pandas as pd

from ..analysis.summary import count_by_month
from ..data.years import SkipSink, read_year_results
from ..utils.numbers import coerce_int

logger = logging.getLogger(__name__)


def summarize_years(
    years: Iterable[Any],
    data_dir: Optional[Union[str, Path]] = None,
    zero_fill: bool = False,
    include_skipped: bool = False,
    output_path: Optional[Union[str, Path]] = None,
    on_skip: Optional[SkipSink] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years that cannot be read are skipped with a warning; the table is
    built from whatever years remain.

    Args:
        years: Years to summarize (any order, duplicates allowed).
        data_dir: Optional directory overriding the bundled data directory.
        zero_fill: Show months without accidents as ``0`` rather than
            ``<NA>``.
        include_skipped: Add an all-``<NA>`` column for every year that
            failed to load, so it stays visible next to zero-filled years.
        output_path: When given, the table is also written there as CSV.
        on_skip: Diagnostic sink for skipped years (see ``read_year_results``).

    Returns:
        DataFrame indexed by ``MONTH`` with one column per year.  Empty
        when no requested year could be read (and ``include_skipped`` is
        off).
    """
    years = list(years)
    results = read_year_results(years, data_dir=data_dir, on_skip=on_skip)

    skipped = []
    if include_skipped:
        for r in results:
            if r.ok:
                continue
            try:
                skipped.append(coerce_int(r.year))
            except (TypeError, ValueError, OverflowError):
                # Non-numeric years cannot label a column
                continue

    table = count_by_month(
        [r.data for r in results],
        zero_fill=zero_fill,
        skipped_years=skipped,
    )

    n_ok = sum(r.ok for r in results)
    logger.info(
        f"Summarized {n_ok} of {len(results)} requested years",
        extra={"years": [str(y) for y in years], "loaded": n_ok},
    )

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(output_path)
        logger.info(f"Summary saved -> {output_path}", extra={"path": str(output_path)})

    return table
