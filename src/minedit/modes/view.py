"""Everything a renderer needs to paint one frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from minedit.buffer import BufferMirror

from .overlays import Overlay


@dataclass(frozen=True, slots=True)
class EditorView:
    buffer: BufferMirror
    mode: str
    command: str
    overlay: Optional[Overlay]
    prompt: Optional[str]
    status: Optional[str]
    finished: bool

    @property
    def status_line(self) -> str:
        state = "MODIFIED" if self.buffer.dirty else "SAVED"
        name = self.buffer.filename or "[No Name]"
        row = self.buffer.cursor[1] + 1
        line = f"[{state}] {name} | Line {row}/{len(self.buffer.lines)}"
        if self.status:
            line = f"{line} | {self.status}"
        return line

    @property
    def command_line(self) -> str:
        if self.prompt is not None:
            return self.prompt
        if self.mode == "command":
            return f":{self.command}"
        return ""
