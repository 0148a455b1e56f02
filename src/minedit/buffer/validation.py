"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .state import EditorState, Position


def clamp_cursor(state: EditorState) -> Position:
    """Pull ``state.cursor`` back inside the buffer, in place."""

    if not state.lines:
        state.cursor = Position(0, 0)
        return state.cursor
    cursor = state.cursor
    cursor.y = min(cursor.y, len(state.lines) - 1)
    cursor.x = min(cursor.x, len(state.lines[cursor.y]))
    return cursor
