"""Built-in key tables for the base modes and both overlays."""

from __future__ import annotations

from typing import Sequence

from minedit.actions import command as command_actions
from minedit.actions import core as core_actions
from minedit.actions import edit as edit_actions
from minedit.actions import overlay as overlay_actions

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="core.enter_command",
        handler=core_actions.enter_command_mode,
        description="Enter command-line mode",
    ),
    ActionRef(
        id="core.quit_immediately",
        handler=core_actions.quit_immediately,
        description="Exit without saving or asking",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=edit_actions.delete_backward,
        description="Delete left of the cursor",
    ),
    ActionRef(
        id="edit.split_line",
        handler=edit_actions.split_line,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.copy_line",
        handler=edit_actions.copy_line,
        description="Copy the current line",
    ),
    ActionRef(
        id="edit.paste",
        handler=edit_actions.paste_clipboard,
        description="Paste the clipboard",
    ),
    ActionRef(
        id="edit.undo",
        handler=edit_actions.undo,
        description="Undo the last change",
    ),
    ActionRef(
        id="edit.redo",
        handler=edit_actions.redo,
        description="Redo the last undone change",
    ),
    ActionRef(
        id="edit.move_up",
        handler=edit_actions.move_up,
        description="Cursor up",
    ),
    ActionRef(
        id="edit.move_down",
        handler=edit_actions.move_down,
        description="Cursor down",
    ),
    ActionRef(
        id="edit.move_left",
        handler=edit_actions.move_left,
        description="Cursor left",
    ),
    ActionRef(
        id="edit.move_right",
        handler=edit_actions.move_right,
        description="Cursor right",
    ),
    ActionRef(
        id="command.submit_line",
        handler=command_actions.submit_command_line,
        description="Evaluate the command line",
    ),
    ActionRef(
        id="command.cancel_line",
        handler=command_actions.cancel_command_line,
        description="Abandon the command line",
    ),
    ActionRef(
        id="command.erase_char",
        handler=command_actions.erase_command_char,
        description="Erase one command character",
    ),
    ActionRef(
        id="prompt.commit",
        handler=overlay_actions.commit_filename,
        description="Save under the typed file name",
    ),
    ActionRef(
        id="prompt.cancel",
        handler=overlay_actions.cancel_filename,
        description="Dismiss the file name prompt",
    ),
    ActionRef(
        id="prompt.erase_char",
        handler=overlay_actions.erase_filename_char,
        description="Erase one file name character",
    ),
    ActionRef(
        id="confirm.save",
        handler=overlay_actions.confirm_save_and_exit,
        description="Save, then exit",
    ),
    ActionRef(
        id="confirm.discard",
        handler=overlay_actions.discard_and_exit,
        description="Exit without saving",
    ),
    ActionRef(
        id="confirm.cancel",
        handler=overlay_actions.cancel_exit,
        description="Stay in the editor",
    ),
)

# (mode, key, action id); ids become "<mode>.<key>".
_TABLE: tuple[tuple[str, str, str], ...] = (
    ("insert", ":", "core.enter_command"),
    ("insert", "ESC", "core.quit_immediately"),
    ("insert", "BACKSPACE", "edit.delete_backward"),
    ("insert", "ENTER", "edit.split_line"),
    ("insert", "ctrl+c", "edit.copy_line"),
    ("insert", "ctrl+v", "edit.paste"),
    ("insert", "ctrl+z", "edit.undo"),
    ("insert", "ctrl+y", "edit.redo"),
    ("insert", "UP", "edit.move_up"),
    ("insert", "DOWN", "edit.move_down"),
    ("insert", "LEFT", "edit.move_left"),
    ("insert", "RIGHT", "edit.move_right"),
    ("command", "ENTER", "command.submit_line"),
    ("command", "ESC", "command.cancel_line"),
    ("command", "BACKSPACE", "command.erase_char"),
    ("filename_prompt", "ENTER", "prompt.commit"),
    ("filename_prompt", "ESC", "prompt.cancel"),
    ("filename_prompt", "BACKSPACE", "prompt.erase_char"),
    ("confirm_exit", "y", "confirm.save"),
    ("confirm_exit", "Y", "confirm.save"),
    ("confirm_exit", "n", "confirm.discard"),
    ("confirm_exit", "N", "confirm.discard"),
    ("confirm_exit", "ESC", "confirm.cancel"),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding(
        id=f"{mode}.{key}",
        mode=mode,
        stroke=KeyStroke.parse(key),
        action_id=action_id,
    )
    for mode, key, action_id in _TABLE
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    modes: Sequence[str] | None = None,
) -> None:
    """Register built-in actions, then the bindings for ``modes`` (all by default)."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if modes is not None and binding.mode not in modes:
            continue
        registry.register_binding(binding, replace=replace)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
