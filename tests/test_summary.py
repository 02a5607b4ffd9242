"""Month x year summaries: pure pivot and the report wrapper."""

import pandas as pd
import pytest

from fars.analysis.summary import count_by_month
from fars.data.files import load_file, resolve_filename
from fars.reports.summary import summarize_years


def _frame(year, months):
    return pd.DataFrame({"MONTH": months, "YEAR": [year] * len(months)})


# ---------------------------------------------------------------------------
# count_by_month
# ---------------------------------------------------------------------------

def test_count_by_month_pivots_to_month_rows():
    table = count_by_month([_frame(2020, [1, 1, 3]), _frame(2021, [3, 12])])
    assert table.index.name == "MONTH"
    assert table.index.tolist() == list(range(1, 13))
    assert table.columns.tolist() == [2020, 2021]
    assert table.loc[1, 2020] == 2
    assert table.loc[3, 2021] == 1
    assert pd.isna(table.loc[2, 2020])
    assert str(table[2020].dtype) == "Int64"


def test_count_by_month_zero_fill():
    table = count_by_month([_frame(2020, [1, 1, 3])], zero_fill=True)
    assert table.loc[2, 2020] == 0
    assert table[2020].sum() == 3
    assert not table.isna().any().any()


def test_count_by_month_ignores_none_slots():
    table = count_by_month([None, _frame(2020, [5]), None])
    assert table.columns.tolist() == [2020]


def test_count_by_month_skipped_years_stay_missing():
    table = count_by_month([_frame(2020, [1])], zero_fill=True, skipped_years=[2019, 2020])
    assert table.columns.tolist() == [2019, 2020]
    assert table[2019].isna().all()
    assert table.loc[2, 2020] == 0


def test_count_by_month_empty_input():
    table = count_by_month([None, None])
    assert table.empty
    assert table.index.name == "MONTH"


def test_count_by_month_only_skipped_years():
    table = count_by_month([None], skipped_years=[1999])
    assert table.shape == (12, 1)
    assert table[1999].isna().all()


def test_duplicate_years_count_twice():
    frame = _frame(2020, [1])
    table = count_by_month([frame, frame])
    assert table.loc[1, 2020] == 2


# ---------------------------------------------------------------------------
# summarize_years (bundled data)
# ---------------------------------------------------------------------------

def test_summarize_two_years_shape_and_totals():
    table = summarize_years([2014, 2015])
    assert table.shape == (12, 2)
    assert table.columns.tolist() == [2014, 2015]
    for year in (2014, 2015):
        assert (table[year] >= 0).all()
        assert table[year].sum() == len(load_file(resolve_filename(year)))


def test_summarize_single_year():
    table = summarize_years([2013])
    assert table.shape == (12, 1)
    assert table[2013].tolist() == [45] * 12


def test_summarize_is_idempotent():
    pd.testing.assert_frame_equal(summarize_years([2013, 2015]), summarize_years([2013, 2015]))


def test_summarize_skips_invalid_year(caplog):
    table = summarize_years([2014, 202])
    assert table.columns.tolist() == [2014]
    assert "invalid year: 202" in caplog.text


def test_summarize_all_invalid_is_empty():
    table = summarize_years([202, 1900], on_skip=lambda y, r: None)
    assert table.empty


# ---------------------------------------------------------------------------
# summarize_years (fixture data)
# ---------------------------------------------------------------------------

def test_summarize_missing_months_are_na(data_dir):
    table = summarize_years([2020, 2021], data_dir=data_dir)
    assert table.loc[1].tolist() == [3, 1]
    assert table.loc[12, 2021] == 2
    assert pd.isna(table.loc[2, 2021])
    assert pd.isna(table.loc[6, 2020])


def test_summarize_distinguishes_zero_from_skipped(data_dir):
    table = summarize_years(
        [2021, 1999],
        data_dir=data_dir,
        zero_fill=True,
        include_skipped=True,
        on_skip=lambda y, r: None,
    )
    assert table.columns.tolist() == [1999, 2021]
    assert table.loc[2, 2021] == 0
    assert table[1999].isna().all()


def test_summarize_writes_csv(data_dir, tmp_path):
    out = tmp_path / "out" / "summary.csv"
    table = summarize_years([2020], data_dir=data_dir, output_path=out)
    assert out.exists()
    saved = pd.read_csv(out, index_col="MONTH")
    assert saved["2020"].sum() == table[2020].sum() == 7
