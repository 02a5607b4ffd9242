"""Shared fixtures: a throwaway data directory with two small years."""

import logging

import pandas as pd
import pytest

_COLUMNS = ["STATE", "ST_CASE", "MONTH", "DAY", "YEAR", "LATITUDE", "LONGITUD", "FATALS"]

# 2020: state 1 -> 3 mapped accidents (Jan); state 2 -> 2 accidents with no
# usable position (Feb); state 4 -> 2 accidents (Mar), one missing longitude.
_ROWS_2020 = [
    (1, 10001, 1, 3, 2020, 32.10, -86.50, 1),
    (1, 10002, 1, 9, 2020, 33.40, -87.20, 1),
    (1, 10003, 1, 21, 2020, 34.60, -85.90, 2),
    (2, 20001, 2, 4, 2020, 99.9999, 999.9999, 1),
    (2, 20002, 2, 17, 2020, 99.9999, 999.9999, 1),
    (4, 40001, 3, 1, 2020, 31.50, -110.00, 1),
    (4, 40002, 3, 30, 2020, 36.80, 999.9999, 1),
]

# 2021: one accident in January, two in December
_ROWS_2021 = [
    (1, 10001, 1, 15, 2021, 32.00, -86.00, 1),
    (1, 10002, 12, 24, 2021, 33.00, -87.00, 1),
    (1, 10003, 12, 31, 2021, 34.00, -88.00, 1),
]


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding accident_2020.csv.bz2 and accident_2021.csv.bz2."""
    directory = tmp_path / "extdata"
    directory.mkdir()
    for year, rows in ((2020, _ROWS_2020), (2021, _ROWS_2021)):
        df = pd.DataFrame(rows, columns=_COLUMNS)
        df.to_csv(directory / f"accident_{year}.csv.bz2", index=False)
    return directory


@pytest.fixture
def no_show(monkeypatch):
    """Fail the test if a figure tries to open a browser."""
    import plotly.graph_objects as go

    def _show(self, *args, **kwargs):
        raise AssertionError("Figure.show() should not be called")

    monkeypatch.setattr(go.Figure, "show", _show)


@pytest.fixture(autouse=True)
def _reset_fars_logging():
    """Drop handlers installed by configure_logging between tests."""
    yield
    pkg_logger = logging.getLogger("fars")
    for handler in list(pkg_logger.handlers):
        if getattr(handler, "_fars_handler", False):
            pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)
