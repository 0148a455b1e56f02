"""Cursor and editable-state value types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(slots=True)
class Position:
    """Cursor location; ``x`` is the column, ``y`` the row."""

    x: int = 0
    y: int = 0

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(slots=True)
class EditorState:
    """Everything one undo step restores.

    ``dirty`` becomes true on the first snapshot after a save and is cleared
    only by a successful save.
    """

    lines: List[str] = field(default_factory=lambda: [""])
    cursor: Position = field(default_factory=Position)
    filename: Optional[str] = None
    dirty: bool = False

    def clone(self) -> "EditorState":
        return EditorState(
            lines=list(self.lines),
            cursor=Position(self.cursor.x, self.cursor.y),
            filename=self.filename,
            dirty=self.dirty,
        )

    @property
    def current_line(self) -> str:
        return self.lines[self.cursor.y]
