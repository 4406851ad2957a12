import pytest

from corazones.csvdata import read_csv, write_csv


def _read_text(tmp_path, text):
    path = tmp_path / "data.csv"
    path.write_bytes(text.encode("utf-8"))
    return read_csv(path)


def test_simple_rows(tmp_path):
    assert _read_text(tmp_path, "a,b\nc,d") == [["a", "b"], ["c", "d"]]


def test_quoted_comma_stays_in_field(tmp_path):
    assert _read_text(tmp_path, '"x,y",z\n') == [["x,y", "z"]]


def test_doubled_quote_is_literal(tmp_path):
    assert _read_text(tmp_path, '"a""b"\n') == [['a"b']]


def test_blank_lines_and_crlf_are_skipped(tmp_path):
    assert _read_text(tmp_path, "a\n\nb\r\n") == [["a"], ["b"]]


def test_empty_last_field_is_dropped(tmp_path):
    assert _read_text(tmp_path, "a,\n") == [["a"]]


def test_empty_middle_field_is_kept(tmp_path):
    assert _read_text(tmp_path, "a,,b\n") == [["a", "", "b"]]


def test_empty_file(tmp_path):
    assert _read_text(tmp_path, "") == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_csv(tmp_path / "absent.csv")


def test_write_quotes_every_field(tmp_path):
    path = tmp_path / "out.csv"
    write_csv(path, [["a", "b"], ['c"d']])
    assert path.read_text(encoding="utf-8") == '"a","b"\n"c""d"\n'


def test_round_trip(tmp_path):
    data = [["age", "sex", "note"], ["63", "1", 'said "hi", left'], ["x,y", "z", "w"]]
    path = tmp_path / "round.csv"
    write_csv(path, data)
    assert read_csv(path) == data


def test_write_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        write_csv(tmp_path / "no" / "such" / "file.csv", [["a"]])