"""Buffer model, editing engine, undo history and file persistence."""

from .buffer import AUTO_PAIRS, Buffer, Transaction
from .files import SaveError, load_lines, write_lines
from .state import EditorState, Position
from .sync import BufferMirror
from .undo import HISTORY_LIMIT, UndoHistory
from .validation import clamp_cursor

__all__ = [
    "AUTO_PAIRS",
    "Buffer",
    "BufferMirror",
    "EditorState",
    "HISTORY_LIMIT",
    "Position",
    "SaveError",
    "Transaction",
    "UndoHistory",
    "clamp_cursor",
    "load_lines",
    "write_lines",
]
