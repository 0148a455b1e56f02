from __future__ import annotations

from typing import List

from minedit.adapters.textual import TextualEditorAdapter, TextualUIHooks
from minedit.modes import EditorView
from minedit.modes.mode_manager import ModeManager, create_default_manager


def make_manager() -> ModeManager:
    return create_default_manager()


def test_adapter_renders_initial_and_updated_views() -> None:
    manager = make_manager()
    views: List[EditorView] = []
    adapter = TextualEditorAdapter(manager, TextualUIHooks(render=views.append))

    adapter.handle_textual_key("h", text="h")
    adapter.handle_textual_key("[", text="[")

    assert len(views) == 3
    assert views[0].buffer.lines == ("",)
    assert views[-1].buffer.lines == ("h[]",)
    assert views[-1].buffer.cursor == (2, 0)
    assert views[-1].status_line.startswith("[MODIFIED] [No Name]")


def test_adapter_upper_cases_modifiers() -> None:
    manager = make_manager()
    adapter = TextualEditorAdapter(manager, TextualUIHooks(render=lambda view: None))
    adapter.handle_textual_key("a", text="a")

    result = adapter.handle_textual_key("z", modifiers=("ctrl",))

    assert result.status == "undo"
    assert manager.context.buffer.lines == [""]


def test_adapter_relays_command_events() -> None:
    manager = make_manager()
    events: List[tuple[str, object | None]] = []
    command_lines: List[str] = []
    hooks = TextualUIHooks(
        render=lambda view: command_lines.append(view.command_line),
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = TextualEditorAdapter(manager, hooks)

    for char in ":w":
        adapter.handle_textual_key(char, text=char)
    adapter.handle_textual_key("ENTER")

    assert ":w" in command_lines
    assert command_lines[-1] == "File name: "
    assert ("command.submit", "w") in events
    assert ("overlay.open", "filename_prompt") in events


def test_adapter_requests_exit_once_finished() -> None:
    manager = make_manager()
    exits: List[bool] = []
    logs: List[str] = []
    hooks = TextualUIHooks(
        render=lambda view: None,
        request_exit=lambda: exits.append(True),
        log=logs.append,
    )
    adapter = TextualEditorAdapter(manager, hooks)

    adapter.handle_textual_key("x", text="x")
    assert exits == []

    adapter.handle_textual_key("ESC")

    assert exits == [True]
    assert manager.view().finished is True
    assert any(line.startswith("key ->") for line in logs)
    assert any("event ->" in line and "editor.exit" in line for line in logs)


def test_adapter_relays_command_line_and_copy_events() -> None:
    manager = make_manager()
    events: List[tuple[str, object | None]] = []
    hooks = TextualUIHooks(
        render=lambda view: None,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = TextualEditorAdapter(manager, hooks)

    adapter.handle_textual_key("a", text="a")
    adapter.handle_textual_key("c", modifiers=("ctrl",))
    adapter.handle_textual_key(":", text=":")
    adapter.handle_textual_key("ESC")

    names = [name for name, _ in events]
    assert ("buffer.copy", "a") in events
    assert names.index("command.start") < names.index("command.end")


def test_adapter_paste_bypasses_key_tables() -> None:
    manager = make_manager()
    views: List[EditorView] = []
    adapter = TextualEditorAdapter(manager, TextualUIHooks(render=views.append))

    result = adapter.handle_textual_paste("(a)\n:q\n")

    assert result.status == "paste"
    assert views[-1].buffer.lines == ("(a)", ":q", "")
    assert views[-1].mode == "insert"
    assert views[-1].overlay is None
