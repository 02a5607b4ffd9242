"""The ``fars`` console script."""

import pytest

from fars.cli import main


def test_years(capsys):
    main(["years"])
    assert capsys.readouterr().out.strip() == "2013 2014 2015"


def test_years_empty_dir(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        main(["--data-dir", str(tmp_path), "years"])
    assert info.value.code == 1
    assert "No accident_<year>.csv.bz2 files" in capsys.readouterr().err


def test_summarize(data_dir, capsys):
    main(["--data-dir", str(data_dir), "summarize", "--years", "2020", "2021", "--zero-fill"])
    out = capsys.readouterr().out
    assert "MONTH" in out
    assert "2020" in out and "2021" in out


def test_summarize_writes_csv(data_dir, tmp_path, capsys):
    out_csv = tmp_path / "summary.csv"
    main([
        "--data-dir", str(data_dir),
        "summarize", "--years", "2020", "1999", "--include-skipped",
        "--output", str(out_csv),
    ])
    assert out_csv.exists()
    header = out_csv.read_text().splitlines()[0]
    assert header == "MONTH,1999,2020"
    assert "invalid year: 1999" in capsys.readouterr().err


def test_summarize_all_years_invalid(data_dir):
    with pytest.raises(SystemExit) as info:
        main(["--data-dir", str(data_dir), "summarize", "--years", "1999"])
    assert info.value.code == 1


def test_map_to_html(data_dir, tmp_path, capsys, no_show):
    out_html = tmp_path / "map.html"
    main([
        "--data-dir", str(data_dir),
        "map", "--state", "1", "--year", "2020", "--output", str(out_html), "--no-show",
    ])
    assert out_html.exists()
    assert "Saved" in capsys.readouterr().out


def test_map_nothing_to_plot(data_dir, capsys, no_show):
    main(["--data-dir", str(data_dir), "map", "--state", "2", "--year", "2020", "--no-show"])
    assert "No accidents to plot" in capsys.readouterr().out


@pytest.mark.parametrize("state, year, message", [
    ("99", "2020", "invalid STATE number: 99"),
    ("1", "1999", "accident_1999.csv.bz2"),
])
def test_map_errors_exit(data_dir, capsys, state, year, message):
    with pytest.raises(SystemExit) as info:
        main(["--data-dir", str(data_dir), "map", "--state", state, "--year", year, "--no-show"])
    assert info.value.code == 1
    assert message in capsys.readouterr().err


def test_log_json(data_dir, capsys):
    main(["--data-dir", str(data_dir), "--log-json", "summarize", "--years", "2020"])
    err = capsys.readouterr().err
    assert '"level": "INFO"' in err
    assert '"loaded": 1' in err


@pytest.mark.parametrize("extra", [[], ["--include-skipped"]])
def test_summarize_failure_leaves_no_csv(data_dir, tmp_path, extra):
    out_csv = tmp_path / "summary.csv"
    with pytest.raises(SystemExit):
        main([
            "--data-dir", str(data_dir),
            "summarize", "--years", "1999", "--output", str(out_csv), *extra,
        ])
    assert not out_csv.exists()
