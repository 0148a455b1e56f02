"""High-level editing verbs reused across modes."""

from .core import enter_command_mode, quit_immediately, save_buffer
from .edit import (
    copy_line,
    delete_backward,
    move_down,
    move_left,
    move_right,
    move_up,
    paste_clipboard,
    redo,
    split_line,
    undo,
)
from .command import cancel_command_line, erase_command_char, submit_command_line
from .overlay import (
    cancel_exit,
    cancel_filename,
    commit_filename,
    confirm_save_and_exit,
    discard_and_exit,
    erase_filename_char,
)

__all__ = [
    "enter_command_mode",
    "quit_immediately",
    "save_buffer",
    "copy_line",
    "delete_backward",
    "move_down",
    "move_left",
    "move_right",
    "move_up",
    "paste_clipboard",
    "redo",
    "split_line",
    "undo",
    "cancel_command_line",
    "erase_command_char",
    "submit_command_line",
    "cancel_exit",
    "cancel_filename",
    "commit_filename",
    "confirm_save_and_exit",
    "discard_and_exit",
    "erase_filename_char",
]
