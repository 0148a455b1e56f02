"""Insert-mode editing verbs bound to control keys and special keys."""

from __future__ import annotations

from minedit.modes.base_mode import ModeContext, ModeResult


def delete_backward(context: ModeContext, match) -> ModeResult:
    del match
    changed = context.buffer.delete()
    return ModeResult(consumed=True, status="delete" if changed else "noop")


def split_line(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.newline()
    return ModeResult(consumed=True, status="newline")


def copy_line(context: ModeContext, match) -> ModeResult:
    del match
    text = context.buffer.copy_line()
    context.bus.emit("buffer.copy", text)
    return ModeResult(consumed=True, status="copy")


def paste_clipboard(context: ModeContext, match) -> ModeResult:
    del match
    changed = context.buffer.paste()
    return ModeResult(consumed=True, status="paste" if changed else "noop")


def undo(context: ModeContext, match) -> ModeResult:
    del match
    changed = context.buffer.undo()
    return ModeResult(consumed=True, status="undo" if changed else "noop")


def redo(context: ModeContext, match) -> ModeResult:
    del match
    changed = context.buffer.redo()
    return ModeResult(consumed=True, status="redo" if changed else "noop")


def _move(context: ModeContext, direction: str) -> ModeResult:
    context.buffer.move_cursor(direction)
    return ModeResult(consumed=True, status="move")


def move_up(context: ModeContext, match) -> ModeResult:
    del match
    return _move(context, "up")


def move_down(context: ModeContext, match) -> ModeResult:
    del match
    return _move(context, "down")


def move_left(context: ModeContext, match) -> ModeResult:
    del match
    return _move(context, "left")


def move_right(context: ModeContext, match) -> ModeResult:
    del match
    return _move(context, "right")


__all__ = [
    "delete_backward",
    "split_line",
    "copy_line",
    "paste_clipboard",
    "undo",
    "redo",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
]
