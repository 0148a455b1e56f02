from __future__ import annotations

import pytest

from minedit.buffer import AUTO_PAIRS, Buffer, EditorState, Position, clamp_cursor


def make_buffer(*lines: str, x: int = 0, y: int = 0) -> Buffer:
    state = EditorState(lines=list(lines) or [""], cursor=Position(x, y))
    return Buffer(state=state)


def test_insert_plain_character_advances_cursor() -> None:
    buffer = make_buffer("ac", x=1)

    buffer.insert("b")

    assert buffer.lines == ["abc"]
    assert buffer.cursor.as_tuple() == (2, 0)
    assert buffer.dirty is True


@pytest.mark.parametrize("opener", sorted(AUTO_PAIRS))
def test_insert_auto_pairs_cursor_between(opener: str) -> None:
    buffer = make_buffer("xy", x=1)

    buffer.insert(opener)

    assert buffer.lines == [f"x{opener}{AUTO_PAIRS[opener]}y"]
    assert buffer.cursor.as_tuple() == (2, 0)


def test_insert_closing_character_is_not_paired() -> None:
    buffer = make_buffer("")

    buffer.insert(")")

    assert buffer.lines == [")"]


def test_delete_removes_character_left_of_cursor() -> None:
    buffer = make_buffer("abc", x=2)

    assert buffer.delete() is True

    assert buffer.lines == ["ac"]
    assert buffer.cursor.as_tuple() == (1, 0)


def test_delete_at_line_start_merges_with_previous() -> None:
    buffer = make_buffer("ab", "cd", x=0, y=1)

    buffer.delete()

    assert buffer.lines == ["abcd"]
    assert buffer.cursor.as_tuple() == (2, 0)


def test_delete_at_buffer_start_is_noop() -> None:
    buffer = make_buffer("abc")

    assert buffer.delete() is False

    assert buffer.lines == ["abc"]
    assert buffer.dirty is False
    assert buffer.history.can_undo() is False


@pytest.mark.parametrize("x", [0, 1, 2, 3])
def test_newline_then_delete_restores_line(x: int) -> None:
    buffer = make_buffer("abc", x=x)

    buffer.newline()
    assert buffer.lines == ["abc"[:x], "abc"[x:]]
    assert buffer.cursor.as_tuple() == (0, 1)

    buffer.delete()
    assert buffer.lines == ["abc"]
    assert buffer.cursor.as_tuple() == (x, 0)


def test_copy_line_does_not_mark_dirty() -> None:
    buffer = make_buffer("hello", "world", y=1)

    assert buffer.copy_line() == "world"

    assert buffer.clipboard == "world"
    assert buffer.dirty is False
    assert buffer.history.can_undo() is False


def test_paste_inserts_clipboard_at_cursor() -> None:
    buffer = make_buffer("one", "ab", y=0)
    buffer.copy_line()
    buffer.move_cursor("down")
    buffer.move_cursor("right")

    assert buffer.paste() is True

    assert buffer.lines == ["one", "aoneb"]
    assert buffer.cursor.as_tuple() == (4, 1)


def test_paste_with_empty_clipboard_records_nothing() -> None:
    buffer = make_buffer("abc")

    assert buffer.paste() is False

    assert buffer.dirty is False
    assert buffer.history.can_undo() is False


def test_move_cursor_wraps_and_clamps() -> None:
    buffer = make_buffer("long line", "ab", x=7)

    buffer.move_cursor("down")
    assert buffer.cursor.as_tuple() == (2, 1)

    buffer.move_cursor("right")
    assert buffer.cursor.as_tuple() == (2, 1)

    buffer.move_cursor("left")
    buffer.move_cursor("left")
    buffer.move_cursor("left")
    assert buffer.cursor.as_tuple() == (9, 0)

    buffer.move_cursor("up")
    assert buffer.cursor.as_tuple() == (9, 0)


def test_move_cursor_rejects_unknown_direction() -> None:
    buffer = make_buffer("abc")

    with pytest.raises(ValueError):
        buffer.move_cursor("sideways")


def test_clamp_cursor_pulls_back_inside_buffer() -> None:
    state = EditorState(lines=["abc", "d"], cursor=Position(10, 10))

    clamp_cursor(state)

    assert state.cursor.as_tuple() == (1, 1)


def test_clamp_cursor_on_empty_buffer_resets_origin() -> None:
    state = EditorState(lines=[], cursor=Position(3, 4))

    clamp_cursor(state)

    assert state.cursor.as_tuple() == (0, 0)


def test_mirror_is_detached_from_live_state() -> None:
    buffer = Buffer.from_text("a\nb", filename="notes.txt")

    mirror = buffer.mirror()
    buffer.insert("z")

    assert mirror.lines == ("a", "b")
    assert mirror.text == "a\nb"
    assert mirror.filename == "notes.txt"
    assert mirror.dirty is False


def test_insert_text_splits_lines_without_auto_pairs() -> None:
    buffer = make_buffer("ab", x=1)

    assert buffer.insert_text("f(x)\r\ng[") is True

    assert buffer.lines == ["af(x)", "g[b"]
    assert buffer.cursor.as_tuple() == (2, 1)

    buffer.undo()
    assert buffer.lines == ["ab"]
    assert buffer.cursor.as_tuple() == (1, 0)


def test_insert_empty_text_records_nothing() -> None:
    buffer = make_buffer("ab")

    assert buffer.insert_text("") is False

    assert buffer.dirty is False
    assert buffer.history.can_undo() is False
