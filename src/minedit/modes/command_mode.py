"""Command-line mode: collects ``:`` text until Enter or Escape."""

from __future__ import annotations

from minedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import KeymapDispatch


class CommandMode(KeymapDispatch, Mode):
    name = "command"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("minedit.modes.command")

    def on_enter(self, previous: str | None) -> None:
        del previous
        self.context.command = ""
        self.context.bus.emit("command.start", None)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self.context.command = ""
        self.context.bus.emit("command.end", None)

    def handle_key(self, key: KeyInput) -> ModeResult:
        return self.dispatch(key)

    def fallback(self, key: KeyInput) -> ModeResult:
        if key.text:
            self.context.command += key.text
            return ModeResult(consumed=True, status="editing")
        return ModeResult(consumed=False, status="miss", message="unhandled")
