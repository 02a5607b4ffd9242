"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input is the list of per-year DataFrames produced by
``fars.data.years.read_years``; output is a month x year count table.

Package Location: src/fars/analysis/summary.py

Missing-cell rule:
    By default a month with no incidents and a year that failed to load
    both show up as ``<NA>`` (or as no column at all for the latter).
    ``zero_fill`` turns the first case into ``0``; ``skipped_years`` adds
    an all-``<NA>`` column for the second case, so the two stay
    distinguishable when both are enabled.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import pandas as pd

_MONTHS: List[int] = list(range(1, 13))


def count_by_month(
    frames: Iterable[Optional[pd.DataFrame]],
    zero_fill: bool = False,
    skipped_years: Optional[Iterable[int]] = None,
) -> pd.DataFrame:
    """
    Count incidents per (YEAR, MONTH) and pivot to a month x year table.

    Args:
        frames: Per-year DataFrames with ``MONTH`` and ``YEAR`` columns.
            ``None`` entries (skipped years) are ignored.
        zero_fill: When ``True``, months without incidents in a loaded
            year are ``0`` instead of ``<NA>``.
        skipped_years: Years to add as all-``<NA>`` columns.  Years that
            also have data are ignored.

    Returns:
        DataFrame indexed by ``MONTH`` (1-12) with one ``Int64`` column per
        year, sorted ascending.  When no frame holds any rows, an empty
        DataFrame indexed by ``MONTH`` is returned (plus any requested
        skipped-year columns, all ``<NA>``).
    """
    present = [f for f in frames if f is not None and not f.empty]
    skipped = sorted(set(skipped_years or []))

    if not present:
        if not skipped:
            return pd.DataFrame(index=pd.Index([], name="MONTH", dtype="int64"))
        table = pd.DataFrame(index=pd.Index(_MONTHS, name="MONTH"))
        return _add_skipped(table, skipped)

    combined = pd.concat(present, ignore_index=True)

    counts = (
        combined.groupby(["YEAR", "MONTH"])
        .size()
        .rename("n")
        .reset_index()
    )

    table = (
        counts.pivot(index="MONTH", columns="YEAR", values="n")
        .reindex(_MONTHS)
        .astype("Int64")
    )
    table.index.name = "MONTH"
    table.columns.name = "YEAR"

    if zero_fill:
        table = table.fillna(0)

    return _add_skipped(table, skipped)


def _add_skipped(table: pd.DataFrame, skipped: List[int]) -> pd.DataFrame:
    for year in skipped:
        if year not in table.columns:
            table[year] = pd.array([pd.NA] * len(table), dtype="Int64")
    table = table.reindex(columns=sorted(table.columns))
    table.columns.name = "YEAR"
    return table
