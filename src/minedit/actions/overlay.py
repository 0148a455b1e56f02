"""Actions for the filename prompt and confirm-exit overlays."""

from __future__ import annotations

from minedit.modes.base_mode import ModeContext, ModeResult
from minedit.modes.overlays import ConfirmExit, FilenamePrompt

from .core import open_filename_prompt, save_buffer


def _close(context: ModeContext) -> None:
    overlay = context.overlays.pop()
    context.bus.emit("overlay.close", overlay.mode)


def commit_filename(context: ModeContext, match) -> ModeResult:
    del match
    prompt = context.overlay
    if not isinstance(prompt, FilenamePrompt):
        return ModeResult(consumed=False, status="no_prompt")
    _close(context)
    saved = save_buffer(context, prompt.text)
    return ModeResult(
        consumed=True,
        status="prompt_saved" if saved else "prompt_save_failed",
        message=context.status,
    )


def cancel_filename(context: ModeContext, match) -> ModeResult:
    del match
    _close(context)
    beneath = context.overlay
    if isinstance(beneath, ConfirmExit):
        beneath.pending_save = False
    return ModeResult(consumed=True, status="prompt_cancel")


def erase_filename_char(context: ModeContext, match) -> ModeResult:
    del match
    prompt = context.overlay
    if isinstance(prompt, FilenamePrompt):
        prompt.text = prompt.text[:-1]
    return ModeResult(consumed=True, status="editing")


def confirm_save_and_exit(context: ModeContext, match) -> ModeResult:
    del match
    if context.buffer.filename is None:
        # The confirm question stays underneath the prompt.
        open_filename_prompt(context)
        return ModeResult(consumed=True, status="confirm_prompt")
    if not save_buffer(context):
        return ModeResult(
            consumed=True, status="confirm_save_failed", message=context.status
        )
    return ModeResult(consumed=True, status="confirm_saved", terminate=True)


def discard_and_exit(context: ModeContext, match) -> ModeResult:
    del match
    return ModeResult(consumed=True, status="confirm_discard", terminate=True)


def cancel_exit(context: ModeContext, match) -> ModeResult:
    del match
    confirm = context.overlay
    if isinstance(confirm, ConfirmExit):
        confirm.pending_save = False
        _close(context)
    return ModeResult(consumed=True, status="confirm_cancel")


__all__ = [
    "commit_filename",
    "cancel_filename",
    "erase_filename_char",
    "confirm_save_and_exit",
    "discard_and_exit",
    "cancel_exit",
]
