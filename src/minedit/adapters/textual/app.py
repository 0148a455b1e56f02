"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the editor is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use minedit.adapters.textual.app"
    ) from exc

from minedit.modes import EditorView
from minedit.modes.mode_manager import ModeManager, create_default_manager
from minedit.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks

CURSOR_STYLE = "reverse"


def render_lines(view: EditorView, top: int, height: int) -> Text:
    """Paint ``height`` buffer lines from ``top`` with the cursor cell reversed."""

    x, y = view.buffer.cursor
    text = Text(no_wrap=True, overflow="crop")
    visible = view.buffer.lines[top : top + height]
    for offset, line in enumerate(visible):
        row = top + offset
        if offset:
            text.append("\n")
        if row != y or view.overlay is not None or view.mode != "insert":
            text.append(line)
            continue
        text.append(line[:x])
        text.append(line[x] if x < len(line) else " ", style=CURSOR_STYLE)
        text.append(line[x + 1 :])
    return text


class EditorApp(App[None]):
    """Full-screen editor: buffer view, status line, command/prompt line."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#command-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    ENABLE_COMMAND_PALETTE = False

    # Control chords would otherwise hit Textual's own bindings first.
    BINDINGS = [
        Binding("ctrl+c", "chord('c')", show=False, priority=True),
        Binding("ctrl+v", "chord('v')", show=False, priority=True),
        Binding("ctrl+z", "chord('z')", show=False, priority=True),
        Binding("ctrl+y", "chord('y')", show=False, priority=True),
    ]

    def __init__(self, manager: ModeManager) -> None:
        super().__init__()
        self.manager = manager
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._command_widget: Static | None = None
        self._top = 0
        self._logger = telemetry.get_logger("minedit.host")

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        self._command_widget = Static("", id="command-line")
        yield self._buffer_widget
        yield self._status_widget
        yield self._command_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            render=self._render_view,
            request_exit=self.exit,
            log=self._logger.debug,
        )
        self.adapter = TextualEditorAdapter(self.manager, hooks)

    def on_resize(self, event: events.Resize) -> None:
        del event
        if self.adapter:
            self.adapter.refresh()

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        key, text, modifiers = self._normalize_key(event)
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()
        event.prevent_default()

    def on_paste(self, event: events.Paste) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_paste(event.text)
        event.stop()

    def action_chord(self, key: str) -> None:
        if self.adapter:
            self.adapter.handle_textual_key(key, modifiers=("CTRL",))

    def _render_view(self, view: EditorView) -> None:
        if self._buffer_widget is None:
            return
        height = max(1, self._buffer_widget.size.height)
        cursor_row = view.buffer.cursor[1]
        if cursor_row < self._top:
            self._top = cursor_row
        elif cursor_row >= self._top + height:
            self._top = cursor_row - height + 1
        self._buffer_widget.update(render_lines(view, self._top, height))
        if self._status_widget:
            self._status_widget.update(Text(view.status_line))
        if self._command_widget:
            self._command_widget.update(Text(view.command_line))

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Tuple[str, Optional[str], Tuple[str, ...]]:
        key = event.key
        if key == "escape":
            return ("ESC", None, ())
        if key in {"enter", "return"}:
            return ("ENTER", None, ())
        if key in {"backspace", "ctrl+h"}:
            return ("BACKSPACE", None, ())
        if key == "tab":
            return ("\t", "\t", ())
        if event.is_printable and event.character:
            return (event.character, event.character, ())
        return (key.upper(), None, ())


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="minedit", description="Minimal terminal text editor."
    )
    parser.add_argument("path", nargs="?", help="File to open")
    parser.add_argument(
        "--log-file",
        default=os.environ.get("MINEDIT_LOG_FILE"),
        help="Write telemetry to this file (default: $MINEDIT_LOG_FILE)",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("MINEDIT_LOG_LEVEL"),
        help="Minimum log level (default: $MINEDIT_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production"),
        default=None,
        help="Named telemetry preset; overrides --log-level",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset, log_file=args.log_file)
    elif args.log_file or args.log_level:
        telemetry.configure(level=args.log_level, log_file=args.log_file)
    manager = create_default_manager(args.path)
    telemetry.record_event(
        "editor.start",
        data={"path": args.path or "", "lines": len(manager.context.buffer.lines)},
    )
    EditorApp(manager).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
