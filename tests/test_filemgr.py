import pytest

from wordreduce.filemgr import (
    append_line,
    append_lines,
    clear_file,
    read_lines,
    write_line,
    write_lines,
)


def test_write_then_read_round_trip(tmp_path):
    target = tmp_path / "data.txt"
    lines = ["alpha 1", "beta 1", "gamma 1"]
    write_lines(target, lines)
    assert read_lines(target) == lines + [""]


def test_file_without_trailing_newline(tmp_path):
    target = tmp_path / "data.txt"
    target.write_text("one\ntwo", encoding="utf-8")
    assert read_lines(target) == ["one", "two"]


def test_empty_file_reads_single_empty_line(tmp_path):
    target = tmp_path / "empty.txt"
    target.write_text("", encoding="utf-8")
    assert read_lines(target) == [""]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.txt")


def test_append_lines_keeps_existing_content(tmp_path):
    target = tmp_path / "data.txt"
    write_lines(target, ["first"])
    append_lines(target, ["second", "third"])
    assert target.read_text(encoding="utf-8") == "first\nsecond\nthird\n"


def test_write_lines_overwrites(tmp_path):
    target = tmp_path / "data.txt"
    write_lines(target, ["old", "content"])
    write_lines(target, ["new"])
    assert read_lines(target) == ["new", ""]


def test_append_line_creates_and_appends(tmp_path):
    target = tmp_path / "out.txt"
    append_line(target, "word 3")
    append_line(target, "other 1")
    assert read_lines(target) == ["word 3", "other 1", ""]


def test_write_line_replaces_content(tmp_path):
    target = tmp_path / "SUCCESS.txt"
    write_lines(target, ["a", "b", "c"])
    write_line(target, "SUCCESS")
    assert target.read_text(encoding="utf-8") == "SUCCESS\n"


def test_clear_file_truncates(tmp_path):
    target = tmp_path / "temp.txt"
    write_lines(target, ["x", "y"])
    clear_file(target)
    assert target.read_text(encoding="utf-8") == ""


def test_clear_file_creates_missing_file(tmp_path):
    target = tmp_path / "new.txt"
    clear_file(target)
    assert target.exists()
    assert target.stat().st_size == 0


def test_append_empty_sequence_leaves_file_unchanged(tmp_path):
    target = tmp_path / "data.txt"
    write_lines(target, ["kept"])
    append_lines(target, [])
    assert read_lines(target) == ["kept", ""]