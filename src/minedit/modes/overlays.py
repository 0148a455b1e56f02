"""Modal overlays stacked above the base Insert/Command modes.

Each variant names the mode that handles its keys; the top of
``ModeContext.overlays`` captures all input until it is popped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(slots=True)
class FilenamePrompt:
    mode: ClassVar[str] = "filename_prompt"
    label: ClassVar[str] = "File name: "

    text: str = ""

    @property
    def prompt(self) -> str:
        return f"{self.label}{self.text}"


@dataclass(slots=True)
class ConfirmExit:
    mode: ClassVar[str] = "confirm_exit"
    label: ClassVar[str] = "Save changes? (y/n)"

    pending_save: bool = True

    @property
    def prompt(self) -> str:
        return self.label


Overlay = Union[FilenamePrompt, ConfirmExit]

__all__ = ["ConfirmExit", "FilenamePrompt", "Overlay"]
