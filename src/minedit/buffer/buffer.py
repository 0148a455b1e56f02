"""Editing engine: the live state, its undo history, and the clipboard."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Mapping, Optional

from minedit.runtime import telemetry

from .files import load_lines, write_lines
from .state import EditorState, Position
from .sync import BufferMirror
from .undo import UndoHistory
from .validation import clamp_cursor

AUTO_PAIRS: Mapping[str, str] = {
    "(": ")",
    "{": "}",
    "[": "]",
    '"': '"',
    "'": "'",
}

DIRECTIONS = ("up", "down", "left", "right")


class Buffer:
    def __init__(
        self,
        *,
        name: str = "main",
        state: Optional[EditorState] = None,
        history: Optional[UndoHistory] = None,
    ) -> None:
        self.name = name
        self.state = state or EditorState()
        self.history = history or UndoHistory()
        self.clipboard = ""
        clamp_cursor(self.state)

    @classmethod
    def from_text(cls, text: str, *, filename: Optional[str] = None) -> "Buffer":
        return cls(state=EditorState(lines=text.split("\n"), filename=filename))

    @classmethod
    def open(cls, filename: Optional[str] = None) -> "Buffer":
        """Load ``filename`` if given; a missing file still names the buffer."""

        lines = load_lines(filename) if filename else [""]
        return cls(state=EditorState(lines=lines, filename=filename))

    @property
    def lines(self) -> list[str]:
        return self.state.lines

    @property
    def cursor(self) -> Position:
        return self.state.cursor

    @property
    def filename(self) -> Optional[str]:
        return self.state.filename

    @property
    def dirty(self) -> bool:
        return self.state.dirty

    def mirror(self) -> BufferMirror:
        return BufferMirror(
            lines=tuple(self.state.lines),
            cursor=self.state.cursor.as_tuple(),
            dirty=self.state.dirty,
            filename=self.state.filename,
        )

    # --- mutations ----------------------------------------------------------
    def insert(self, char: str) -> None:
        with Transaction(self, "insert"):
            cursor = self.state.cursor
            line = self.state.current_line
            text = char + AUTO_PAIRS.get(char, "")
            self.state.lines[cursor.y] = line[: cursor.x] + text + line[cursor.x :]
            cursor.x += len(char)

    def delete(self) -> bool:
        """Backspace. Returns False (and records nothing) at the buffer start."""

        cursor = self.state.cursor
        if cursor.x == 0 and cursor.y == 0:
            return False
        with Transaction(self, "delete"):
            lines = self.state.lines
            if cursor.x > 0:
                line = lines[cursor.y]
                lines[cursor.y] = line[: cursor.x - 1] + line[cursor.x :]
                cursor.x -= 1
            else:
                merged = lines.pop(cursor.y)
                cursor.y -= 1
                cursor.x = len(lines[cursor.y])
                lines[cursor.y] += merged
        return True

    def newline(self) -> None:
        with Transaction(self, "newline"):
            cursor = self.state.cursor
            line = self.state.current_line
            self.state.lines[cursor.y] = line[: cursor.x]
            self.state.lines.insert(cursor.y + 1, line[cursor.x :])
            cursor.y += 1
            cursor.x = 0

    def copy_line(self) -> str:
        self.clipboard = self.state.current_line if self.state.lines else ""
        return self.clipboard

    def paste(self) -> bool:
        if not self.clipboard:
            return False
        with Transaction(self, "paste"):
            cursor = self.state.cursor
            line = self.state.current_line
            self.state.lines[cursor.y] = (
                line[: cursor.x] + self.clipboard + line[cursor.x :]
            )
            cursor.x += len(self.clipboard)
        return True

    def insert_text(self, text: str) -> bool:
        """Insert ``text`` verbatim as one undo step; no auto-pairs."""

        text = text.replace("\r\n", "\n").replace("\r", "\n")
        if not text:
            return False
        with Transaction(self, "insert_text"):
            cursor = self.state.cursor
            line = self.state.current_line
            pieces = text.split("\n")
            pieces[0] = line[: cursor.x] + pieces[0]
            tail_x = len(pieces[-1]) if len(pieces) > 1 else len(pieces[0])
            pieces[-1] += line[cursor.x :]
            self.state.lines[cursor.y : cursor.y + 1] = pieces
            cursor.y += len(pieces) - 1
            cursor.x = tail_x
        return True

    # --- history ------------------------------------------------------------
    def undo(self) -> bool:
        restored = self.history.undo(self.state)
        return self._restore(restored, "undo")

    def redo(self) -> bool:
        restored = self.history.redo(self.state)
        return self._restore(restored, "redo")

    def _restore(self, restored: Optional[EditorState], label: str) -> bool:
        if restored is None:
            return False
        self.state = restored
        clamp_cursor(self.state)
        telemetry.record_event(
            f"buffer.{label}",
            level="debug",
            data={
                "buffer": self.name,
                "undo_depth": self.history.undo_depth,
                "redo_depth": self.history.redo_depth,
            },
        )
        return True

    # --- navigation & persistence --------------------------------------------
    def move_cursor(self, direction: str) -> Position:
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction '{direction}'")
        cursor = self.state.cursor
        lines = self.state.lines
        if not lines:
            return cursor

        if direction == "up" and cursor.y > 0:
            cursor.y -= 1
            cursor.x = min(cursor.x, len(lines[cursor.y]))
        elif direction == "down" and cursor.y + 1 < len(lines):
            cursor.y += 1
            cursor.x = min(cursor.x, len(lines[cursor.y]))
        elif direction == "left":
            if cursor.x > 0:
                cursor.x -= 1
            elif cursor.y > 0:
                cursor.y -= 1
                cursor.x = len(lines[cursor.y])
        elif direction == "right":
            if cursor.x < len(lines[cursor.y]):
                cursor.x += 1
            elif cursor.y + 1 < len(lines):
                cursor.y += 1
                cursor.x = 0
        return cursor

    def save(self, filename: Optional[str] = None) -> str:
        """Write the buffer out; raises ``SaveError`` and leaves state alone on failure."""

        target = filename if filename is not None else self.state.filename
        with telemetry.span(
            "buffer::save",
            component=True,
            metadata={"buffer": self.name, "path": target or ""},
        ):
            write_lines(target or "", self.state.lines)
        self.state.filename = target
        self.state.dirty = False
        return target or ""


class Transaction(AbstractContextManager["Transaction"]):
    """Snapshot, mark dirty, run the edit, then clamp the cursor."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        state = self.buffer.state
        self.buffer.history.record(state)
        state.dirty = True
        if not state.lines:
            state.lines.append("")
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        clamp_cursor(self.buffer.state)
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
