"""Read-only buffer snapshot handed to hosts for painting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class BufferMirror:
    """Host-friendly copy of the live state; mutating it never reaches the buffer."""

    lines: Tuple[str, ...]
    cursor: Tuple[int, int]  # (x, y)
    dirty: bool
    filename: Optional[str]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
