from __future__ import annotations

import pytest

from minedit.buffer import Buffer, SaveError, load_lines, write_lines
from minedit.buffer.files import split_lines


def test_split_lines_handles_crlf_and_trailing_newline() -> None:
    assert split_lines("a\r\nb\n") == ["a", "b"]
    assert split_lines("") == [""]
    assert split_lines("a\n\n") == ["a", ""]


def test_load_missing_file_yields_single_empty_line(tmp_path) -> None:
    assert load_lines(str(tmp_path / "missing.txt")) == [""]


def test_load_undecodable_file_yields_single_empty_line(tmp_path) -> None:
    path = tmp_path / "binary.bin"
    path.write_bytes(b"\xff\xfe\xfa")

    assert load_lines(str(path)) == [""]


def test_write_joins_without_trailing_newline(tmp_path) -> None:
    path = tmp_path / "out.txt"

    write_lines(str(path), ["one", "two", ""])

    assert path.read_bytes() == b"one\ntwo\n"


def test_write_without_name_raises() -> None:
    with pytest.raises(SaveError):
        write_lines("", ["x"])


def test_write_into_missing_directory_raises_save_error(tmp_path) -> None:
    target = tmp_path / "nope" / "out.txt"

    with pytest.raises(SaveError) as excinfo:
        write_lines(str(target), ["x"])

    assert excinfo.value.path == str(target)


def test_open_keeps_name_of_missing_file(tmp_path) -> None:
    path = tmp_path / "new.txt"

    buffer = Buffer.open(str(path))

    assert buffer.lines == [""]
    assert buffer.filename == str(path)
    assert buffer.dirty is False


def test_save_records_filename_and_clears_dirty(tmp_path) -> None:
    path = tmp_path / "saved.txt"
    buffer = Buffer()
    buffer.insert("h")
    buffer.insert("i")

    assert buffer.save(str(path)) == str(path)

    assert path.read_text(encoding="utf-8") == "hi"
    assert buffer.filename == str(path)
    assert buffer.dirty is False


def test_failed_save_leaves_state_untouched(tmp_path) -> None:
    buffer = Buffer()
    buffer.insert("x")

    with pytest.raises(SaveError):
        buffer.save(str(tmp_path / "missing" / "file.txt"))

    assert buffer.filename is None
    assert buffer.dirty is True


def test_round_trip_through_disk(tmp_path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("first\nsecond", encoding="utf-8")

    buffer = Buffer.open(str(path))
    buffer.move_cursor("down")
    for _ in "second":
        buffer.move_cursor("right")
    buffer.newline()
    buffer.save()

    assert buffer.lines == ["first", "second", ""]
    assert path.read_text(encoding="utf-8") == "first\nsecond\n"
