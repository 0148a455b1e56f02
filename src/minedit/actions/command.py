"""Actions that edit and evaluate the ``:`` command line."""

from __future__ import annotations

from typing import Callable, Dict

from minedit.modes.base_mode import ModeContext, ModeResult
from minedit.modes.overlays import ConfirmExit

from .core import open_filename_prompt, save_buffer

CommandHandler = Callable[[ModeContext], ModeResult]


def submit_command_line(context: ModeContext, match) -> ModeResult:
    """Run the typed command; whatever happens, land back in Insert mode."""

    del match
    text = context.command.strip()
    context.command = ""
    context.bus.emit("command.submit", text)
    handler = _COMMAND_HANDLERS.get(text)
    if handler is None:
        return _unknown_command(context, text)
    return handler(context)


def cancel_command_line(context: ModeContext, match) -> ModeResult:
    del match
    context.command = ""
    return ModeResult(consumed=True, switch_to="insert", message="command_cancel")


def erase_command_char(context: ModeContext, match) -> ModeResult:
    del match
    context.command = context.command[:-1]
    return ModeResult(consumed=True, status="editing")


def _unknown_command(context: ModeContext, command: str) -> ModeResult:
    context.bus.emit("command.unknown", command)
    return ModeResult(
        consumed=True,
        switch_to="insert",
        status="command_unknown",
        message=command,
    )


def _handle_write(context: ModeContext) -> ModeResult:
    if context.buffer.filename is None:
        open_filename_prompt(context)
        return ModeResult(consumed=True, switch_to="insert", status="command_prompt")
    saved = save_buffer(context)
    return ModeResult(
        consumed=True,
        switch_to="insert",
        status="command_write" if saved else "command_write_failed",
        message=context.status,
    )


def _handle_quit(context: ModeContext) -> ModeResult:
    if context.buffer.dirty:
        context.overlays.append(ConfirmExit(pending_save=True))
        context.bus.emit("overlay.open", ConfirmExit.mode)
        return ModeResult(consumed=True, switch_to="insert", status="command_confirm")
    return ModeResult(
        consumed=True, switch_to="insert", status="command_quit", terminate=True
    )


def _handle_wq(context: ModeContext) -> ModeResult:
    # With no filename this only prompts; the prompt's save does not quit.
    if context.buffer.filename is None:
        open_filename_prompt(context)
        return ModeResult(consumed=True, switch_to="insert", status="command_prompt")
    if not save_buffer(context):
        return ModeResult(
            consumed=True,
            switch_to="insert",
            status="command_write_failed",
            message=context.status,
        )
    return ModeResult(
        consumed=True, switch_to="insert", status="command_wq", terminate=True
    )


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "w": _handle_write,
    "q": _handle_quit,
    "wq": _handle_wq,
}


__all__ = ["submit_command_line", "cancel_command_line", "erase_command_char"]
