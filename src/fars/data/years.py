"""
FARS Year Aggregator (Imperative Shell)

Loads several years of accident data in one call, keeping only the
``MONTH`` and ``YEAR`` columns needed for monthly summaries.

Package Location: src/fars/data/years.py

Partial-failure rule:
    A year whose file cannot be resolved or loaded never aborts the
    batch.  The failure is raised internally as ``InvalidYearWarning``,
    caught in the loop, reported to the ``on_skip`` sink and recorded as a
    skipped slot.  Output order always matches input order, duplicates
    included.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Union

import pandas as pd

from .files import load_file, resolve_filename
from ..utils.numbers import coerce_int

logger = logging.getLogger(__name__)

# Columns kept per year
_YEAR_COLUMNS: List[str] = ["MONTH", "YEAR"]

SkipSink = Callable[[Any, str], None]


class InvalidYearWarning(UserWarning):
    """Internal signal that one requested year could not be read."""

    def __init__(self, year: Any, reason: str):
        self.year = year
        self.reason = reason
        super().__init__(f"invalid year: {year} ({reason})")


@dataclass(frozen=True)
class YearResult:
    """Outcome of reading one requested year."""

    year: Any
    data: Optional[pd.DataFrame] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.data is not None


def _log_skip(year: Any, reason: str) -> None:
    logger.warning(f"invalid year: {year}", extra={"year": str(year), "reason": reason})


def read_year_results(
    years: Iterable[Any],
    data_dir: Optional[Union[str, Path]] = None,
    on_skip: Optional[SkipSink] = None,
) -> List[YearResult]:
    """
    Read each requested year and return one ``YearResult`` per input year.

    Args:
        years: Years in any order; duplicates are read again.
        data_dir: Optional directory overriding the bundled data directory.
        on_skip: Callable ``(year, reason)`` invoked for every skipped year.
            Defaults to a ``logger.warning`` call.

    Returns:
        List aligned with *years*.  Successful entries hold a DataFrame
        with columns ``[MONTH, YEAR]``; skipped entries hold ``None`` and
        the failure reason.
    """
    sink = on_skip or _log_skip
    results: List[YearResult] = []

    for year in years:
        try:
            data = _read_one(year, data_dir)
        except InvalidYearWarning as warn:
            sink(year, warn.reason)
            results.append(YearResult(year=year, reason=warn.reason))
        else:
            results.append(YearResult(year=year, data=data))

    return results


def read_years(
    years: Iterable[Any],
    data_dir: Optional[Union[str, Path]] = None,
    on_skip: Optional[SkipSink] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Read several years of data, returning ``None`` for years that failed.

    Never raises for a bad year; see ``read_year_results`` for arguments.

    Example:
        >>> frames = read_years([2013, 2014, 202])
        >>> [f is None for f in frames]
        [False, False, True]
    """
    return [r.data for r in read_year_results(years, data_dir, on_skip)]


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _read_one(year: Any, data_dir: Optional[Union[str, Path]]) -> pd.DataFrame:
    """Resolve, load and project one year; failures become InvalidYearWarning."""
    try:
        path = resolve_filename(year, data_dir)
        df = load_file(path)
        df = df.assign(YEAR=coerce_int(year))
        return df.loc[:, _YEAR_COLUMNS]
    except (OSError, EOFError, KeyError, ValueError) as exc:
        raise InvalidYearWarning(year, str(exc)) from exc
