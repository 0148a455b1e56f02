"""Bounded undo/redo over whole-state snapshots."""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from .state import EditorState

HISTORY_LIMIT = 50


class UndoHistory:
    """Two snapshot stacks; the undo side drops its oldest entry past ``limit``."""

    def __init__(self, *, limit: int = HISTORY_LIMIT) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        self.limit = limit
        self._undo: Deque[EditorState] = deque(maxlen=limit)
        self._redo: List[EditorState] = []

    def record(self, state: EditorState) -> None:
        """Store a copy of ``state`` ahead of a mutation; invalidates redo."""

        self._redo.clear()
        self._undo.append(state.clone())

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def undo(self, current: EditorState) -> Optional[EditorState]:
        if not self._undo:
            return None
        self._redo.append(current.clone())
        return self._undo.pop()

    def redo(self, current: EditorState) -> Optional[EditorState]:
        if not self._redo:
            return None
        self._undo.append(current.clone())
        return self._redo.pop()
