"""Textual-free bridge between host key events and the ModeManager."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from minedit.modes import EditorView, KeyInput, ModeResult
from minedit.modes.mode_manager import ModeManager


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to drive the host UI."""

    render: Callable[[EditorView], None]
    request_exit: Callable[[], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    # Optional debug sink for one-line traces of every key
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Feeds normalized keys to the manager and repaints after each one."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._subscribe_events()
        self.refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            switch_to=result.switch_to,
            terminate=result.terminate,
        )
        self.refresh()
        if self.manager.finished:
            self.hooks.request_exit()
        return result

    def handle_textual_paste(self, text: str) -> ModeResult:
        self._log_state("paste ->", size=len(text))
        result = self.manager.handle_paste(text)
        self._log_state("result <-", status=result.status)
        self.refresh()
        return result

    def refresh(self) -> EditorView:
        view = self.manager.view()
        self.hooks.render(view)
        return view

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in (
            "command.start",
            "command.end",
            "command.submit",
            "command.unknown",
            "buffer.save",
            "buffer.save_failed",
            "buffer.copy",
            "overlay.open",
            "overlay.close",
            "editor.exit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        context = self.manager.context
        active_mode = self.manager.active_mode
        overlay = context.overlay
        return {
            "mode": active_mode.name if active_mode else "?",
            "overlay": overlay.mode if overlay is not None else None,
            "cursor": context.buffer.cursor.as_tuple(),
            "dirty": context.buffer.dirty,
            "command": context.command,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
