"""Core action implementations shared across modes."""

from __future__ import annotations

from typing import Optional

from minedit.buffer import SaveError
from minedit.modes.base_mode import ModeContext, ModeResult
from minedit.modes.overlays import FilenamePrompt
from minedit.runtime import telemetry


def enter_command_mode(context: ModeContext, match) -> ModeResult:
    del match
    return ModeResult(consumed=True, switch_to="command", message="enter_command")


def quit_immediately(context: ModeContext, match) -> ModeResult:
    """Escape in Insert mode: leave at once, unsaved changes or not."""

    del match
    return ModeResult(
        consumed=True,
        status="quit",
        message="exit_insert",
        terminate=True,
    )


def save_buffer(context: ModeContext, filename: Optional[str] = None) -> bool:
    """Save and report the outcome in ``context.status``; never raises."""

    buffer = context.buffer
    try:
        path = buffer.save(filename)
    except SaveError as exc:
        context.status = str(exc)
        context.bus.emit("buffer.save_failed", {"path": exc.path, "error": str(exc)})
        telemetry.record_event(
            "buffer.save_failed",
            level="error",
            data={"path": exc.path or "", "error": str(exc)},
        )
        return False

    context.status = f"Wrote {path} ({len(buffer.lines)} lines)"
    context.bus.emit("buffer.save", {"path": path})
    telemetry.record_event("buffer.save", data={"path": path})
    return True


def open_filename_prompt(context: ModeContext) -> FilenamePrompt:
    prompt = FilenamePrompt()
    context.overlays.append(prompt)
    context.bus.emit("overlay.open", prompt.mode)
    return prompt


__all__ = [
    "enter_command_mode",
    "quit_immediately",
    "save_buffer",
    "open_filename_prompt",
]
