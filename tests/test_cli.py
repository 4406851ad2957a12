from corazones.cli import main
from corazones.csvdata import write_csv

PREFIX = "The entropy of the loaded DataSet is: "


def _row(output):
    return ["40", "0", "0", "120", "200", "0", "0", "0", "0", "0", "0", output]


def test_prints_entropy(tmp_path, capsys):
    path = tmp_path / "heart.csv"
    write_csv(path, [["header"] * 12, _row("1"), _row("1"), _row("0")])
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == PREFIX + "1\n"


def test_missing_file_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "missing.csv" in captured.err


def test_bad_data_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    write_csv(path, [["header"], ["x", "y"], ["tail"]])
    assert main([str(path)]) == 1
    assert "invalid data" in capsys.readouterr().err