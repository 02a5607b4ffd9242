"""
FARS File Resolution and Loading (Imperative Shell)

Maps a year to its bundled ``accident_<year>.csv.bz2`` file and parses
that file into a DataFrame.  Path construction (``make_filename``) and
the existence check (``resolve_filename``) are kept as separate steps so
either can be exercised on its own.

Package Location: src/fars/data/files.py

Data directory:
    Yearly files ship inside the package under ``fars/extdata/``.  Every
    public function accepts an optional ``data_dir`` that replaces the
    bundled directory for that call only (no global state, no env vars).
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, List, Optional, Union

import pandas as pd

from ..utils.numbers import coerce_int

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_DATA_DIRNAME = "extdata"
_FILENAME_TEMPLATE = "accident_{year}.csv.bz2"
_FILENAME_PATTERN = re.compile(r"^accident_(\d+)\.csv\.bz2$")


class FileResolutionError(FileNotFoundError):
    """
    Raised when no data file exists for a requested year.

    Attributes:
        year: The year as supplied by the caller.
        path: The path that was checked, or ``None`` when the year could
            not be coerced to an integer at all.
    """

    def __init__(self, year: Any, path: Optional[Path] = None):
        self.year = year
        self.path = path
        if path is None:
            message = f"cannot build a data file name from year {year!r}"
        else:
            message = f"file '{path}' does not exist (year {year})"
        super().__init__(message)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_data_dir(data_dir: Optional[Union[str, Path]] = None) -> Path:
    """Return *data_dir* as a Path, or the bundled ``extdata`` directory."""
    if data_dir is not None:
        return Path(data_dir)
    return Path(__file__).resolve().parent.parent / _DATA_DIRNAME


def make_filename(year: Any) -> str:
    """
    Build the canonical file name for one year of accident data.

    Args:
        year: Four-digit year; ints, floats and numeric strings are
            accepted and truncated to an integer.

    Returns:
        File name such as ``"accident_2013.csv.bz2"``.

    Raises:
        FileResolutionError: If *year* is not numeric.

    Example:
        >>> make_filename("2013")
        'accident_2013.csv.bz2'
    """
    try:
        year_int = coerce_int(year)
    except (TypeError, ValueError, OverflowError) as exc:
        raise FileResolutionError(year) from exc
    return _FILENAME_TEMPLATE.format(year=year_int)


def resolve_filename(
    year: Any,
    data_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Resolve a year to the path of its data file, checking that it exists.

    Args:
        year: Four-digit year (numeric-like).
        data_dir: Optional directory overriding the bundled data directory.

    Returns:
        Absolute Path to ``accident_<year>.csv.bz2``.

    Raises:
        FileResolutionError: If the year is not numeric or the file is
            missing.
    """
    path = get_data_dir(data_dir) / make_filename(year)
    if not path.exists():
        raise FileResolutionError(year, path)
    return path


def load_file(path: Union[str, Path]) -> pd.DataFrame:
    """
    Parse one compressed accident CSV into a DataFrame.

    Existence is checked before parsing so that a missing file is always
    reported as ``FileNotFoundError`` rather than a parser error.
    Compression is inferred from the ``.bz2`` suffix.  ``low_memory=False``
    makes pandas type each column in a single pass, which keeps mixed-type
    chunk warnings out of the caller's output.

    Args:
        path: Path to a ``.csv`` or ``.csv.bz2`` file.

    Returns:
        DataFrame with one row per incident and the file's columns as-is.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"file '{path}' does not exist")

    df = pd.read_csv(path, low_memory=False)
    logger.debug(
        f"Loaded {len(df)} rows from {path.name}",
        extra={"path": str(path), "rows": len(df)},
    )
    return df


def available_years(data_dir: Optional[Union[str, Path]] = None) -> List[int]:
    """
    List the years that have a data file in the data directory.

    Returns:
        Sorted list of years.  Empty when the directory does not exist.
    """
    directory = get_data_dir(data_dir)
    if not directory.is_dir():
        return []

    years = []
    for entry in directory.iterdir():
        match = _FILENAME_PATTERN.match(entry.name)
        if match:
            years.append(int(match.group(1)))
    return sorted(years)
