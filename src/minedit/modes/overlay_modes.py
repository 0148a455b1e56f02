"""Handlers for the filename prompt and the confirm-exit question."""

from __future__ import annotations

from .base_mode import KeyInput, Mode, ModeResult
from .keymap_helpers import KeymapDispatch
from .overlays import ConfirmExit, FilenamePrompt


class FilenamePromptMode(KeymapDispatch, Mode):
    name = FilenamePrompt.mode
    overlay = True

    def handle_key(self, key: KeyInput) -> ModeResult:
        return self.dispatch(key)

    def fallback(self, key: KeyInput) -> ModeResult:
        prompt = self.context.overlay
        if isinstance(prompt, FilenamePrompt) and key.text:
            prompt.text += key.text
            return ModeResult(consumed=True, status="editing")
        return ModeResult(consumed=True, status="ignored")


class ConfirmExitMode(KeymapDispatch, Mode):
    name = ConfirmExit.mode
    overlay = True

    def handle_key(self, key: KeyInput) -> ModeResult:
        return self.dispatch(key)

    def fallback(self, key: KeyInput) -> ModeResult:
        # Only y/n/Escape mean anything here; everything else is swallowed.
        del key
        return ModeResult(consumed=True, status="ignored")
