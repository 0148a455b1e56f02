"""Editor modes, overlays and key dispatch."""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .overlays import ConfirmExit, FilenamePrompt, Overlay
from .insert_mode import InsertMode
from .command_mode import CommandMode
from .overlay_modes import ConfirmExitMode, FilenamePromptMode
from .view import EditorView

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "ConfirmExit",
    "FilenamePrompt",
    "Overlay",
    "InsertMode",
    "CommandMode",
    "ConfirmExitMode",
    "FilenamePromptMode",
    "EditorView",
]
