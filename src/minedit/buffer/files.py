"""Loading and saving buffers as plain UTF-8 text."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from minedit.runtime import telemetry

ENCODING = "utf-8"


class SaveError(RuntimeError):
    """Raised when a buffer cannot be written to ``path``."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


def split_lines(text: str) -> List[str]:
    """Split on ``\\n``; a trailing newline does not open an extra line."""

    if not text:
        return [""]
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load_lines(path: str) -> List[str]:
    """Read ``path`` into lines; anything unreadable becomes one empty line."""

    try:
        text = Path(path).read_text(encoding=ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        telemetry.record_event(
            "buffer.load_failed",
            level="debug",
            data={"path": path, "reason": str(exc)},
        )
        return [""]
    return split_lines(text)


def write_lines(path: str, lines: Iterable[str]) -> None:
    if not path:
        raise SaveError("No file name", path=path)
    try:
        Path(path).write_text("\n".join(lines), encoding=ENCODING, newline="")
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise SaveError(f"Cannot write {path}: {reason}", path=path) from exc


__all__ = ["SaveError", "load_lines", "write_lines", "split_lines"]
