"""Mode manager: routes keys to the top overlay or the active base mode."""

from __future__ import annotations

from typing import Dict, Optional, Type

from minedit.buffer import Buffer
from minedit.keymaps import KeymapRegistry, KeymapResolver
from minedit.keymaps.defaults import load_default_keymaps
from minedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .command_mode import CommandMode
from .insert_mode import InsertMode
from .overlay_modes import ConfirmExitMode, FilenamePromptMode
from .overlays import FilenamePrompt
from .view import EditorView


class ModeManager:
    """Owns the active mode, the overlay routing and the exit flag."""

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.finished = False
        self.logger = telemetry.get_logger("minedit.modes")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="minedit.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="minedit.keymaps"
        )
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self.context.extras.setdefault("keymap_resolver", self.keymap_resolver)
        self.context.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    def register_mode(self, mode_cls: Type[Mode], /, **mode_kwargs: object) -> Mode:
        mode = mode_cls(self.context, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None and not mode.overlay:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        target = self._modes.get(name)
        if target is None:
            raise KeyError(f"Unknown mode '{name}'")
        if target.overlay:
            raise ValueError(f"Mode '{name}' is an overlay and cannot be activated")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        target.on_enter(previous.name if previous else None)
        telemetry.record_event("mode.switch", level="debug", data={"mode": name})

    def handle_key(self, key: KeyInput) -> ModeResult:
        if self.finished:
            return ModeResult(consumed=False, status="finished")
        mode = self._route()
        self.context.status = None
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        return self._after_mode_result(result)

    def handle_paste(self, text: str) -> ModeResult:
        """Deliver pasted text as data; never reaches the key tables."""

        if self.finished:
            return ModeResult(consumed=False, status="finished")
        self.context.status = None
        overlay = self.context.overlay
        single_line = text.replace("\r", "\n").split("\n", 1)[0]
        if isinstance(overlay, FilenamePrompt):
            overlay.text += single_line
            return ModeResult(consumed=True, status="editing")
        if overlay is not None:
            return ModeResult(consumed=True, status="ignored")
        active = self.active_mode
        if active is not None and active.name == CommandMode.name:
            self.context.command += single_line
            return ModeResult(consumed=True, status="editing")
        changed = self.context.buffer.insert_text(text)
        return ModeResult(consumed=True, status="paste" if changed else "noop")

    def _route(self) -> Mode:
        overlay = self.context.overlay
        if overlay is not None:
            handler = self._modes.get(overlay.mode)
            if handler is None:
                raise RuntimeError(f"No handler for overlay '{overlay.mode}'")
            return handler
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        return mode

    def _after_mode_result(self, result: ModeResult) -> ModeResult:
        if result.switch_to:
            self.switch_mode(result.switch_to)
        if result.terminate:
            self.finished = True
            self.context.bus.emit("editor.exit", {"dirty": self.context.buffer.dirty})
            telemetry.record_event(
                "editor.exit",
                data={"dirty": self.context.buffer.dirty, "reason": result.status},
            )
        return result

    def view(self) -> EditorView:
        overlay = self.context.overlay
        active = self.active_mode
        return EditorView(
            buffer=self.context.buffer.mirror(),
            mode=active.name if active else "",
            command=self.context.command,
            overlay=overlay,
            prompt=overlay.prompt if overlay is not None else None,
            status=self.context.status,
            finished=self.finished,
        )


def create_default_manager(
    filename: Optional[str] = None, *, buffer: Optional[Buffer] = None
) -> ModeManager:
    """Open ``filename`` (or adopt ``buffer``) with every mode + default keymaps."""

    context = ModeContext(buffer=buffer or Buffer.open(filename), bus=ModeBus())
    manager = ModeManager(context)
    manager.register_mode(InsertMode)
    manager.register_mode(CommandMode)
    manager.register_mode(FilenamePromptMode)
    manager.register_mode(ConfirmExitMode)
    return manager
