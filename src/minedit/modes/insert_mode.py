"""Insert mode: typed text goes straight into the buffer."""

from __future__ import annotations

from minedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import KeymapDispatch


class InsertMode(KeymapDispatch, Mode):
    name = "insert"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("minedit.modes.insert")

    def handle_key(self, key: KeyInput) -> ModeResult:
        return self.dispatch(key)

    def fallback(self, key: KeyInput) -> ModeResult:
        if not key.text:
            return ModeResult(consumed=False, status="miss", message="unhandled")
        for char in key.text:
            self.context.buffer.insert(char)
        return ModeResult(consumed=True, status="insert")
