from __future__ import annotations

import pytest

from minedit.keymaps import (
    ActionRef,
    Binding,
    KeyStroke,
    KeymapConflictError,
    KeymapRegistry,
    KeymapResolver,
)
from minedit.keymaps.defaults import (
    DEFAULT_ACTIONS,
    DEFAULT_BINDINGS,
    load_default_keymaps,
)


def make_action(action_id: str) -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    binding_id: str,
    *,
    mode: str = "insert",
    key: str = "ctrl+k",
    action_id: str = "core.test",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        stroke=KeyStroke.parse(key),
        action_id=action_id,
    )


def build_registry(bindings: list[Binding]) -> KeymapRegistry:
    registry = KeymapRegistry()
    for action_id in {binding.action_id for binding in bindings}:
        registry.register_action(make_action(action_id))
    for binding in bindings:
        registry.register_binding(binding)
    return registry


def test_keystroke_parse_normalizes_modifiers() -> None:
    stroke = KeyStroke.parse("CTRL+z")

    assert stroke.key == "z"
    assert stroke.modifiers == ("ctrl",)
    assert stroke.token == "ctrl+z"
    assert KeyStroke.parse("+").token == "+"
    assert KeyStroke(key="z", modifiers=("CTRL", "ctrl")).token == "ctrl+z"


def test_keystroke_rejects_empty_key() -> None:
    with pytest.raises(ValueError):
        KeyStroke(key="")


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding("insert.k"))


def test_register_binding_conflict_detection() -> None:
    registry = build_registry([make_binding("first")])

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding("second"))

    assert excinfo.value.conflicts[0].id == "first"


def test_register_binding_replace_drops_conflict() -> None:
    registry = build_registry([make_binding("first")])

    registry.register_binding(make_binding("second"), replace=True)

    assert registry.lookup("insert", "ctrl+k").id == "second"
    with pytest.raises(KeyError):
        registry.get_binding("first")


def test_same_key_in_different_modes_does_not_conflict() -> None:
    registry = build_registry(
        [make_binding("a", mode="insert"), make_binding("b", mode="command")]
    )

    assert registry.stats().modes == ("command", "insert")
    assert registry.stats().binding_count == 2


def test_unregister_binding_clears_index() -> None:
    registry = build_registry([make_binding("only")])
    revision = registry.revision()

    removed = registry.unregister_binding("only")

    assert removed is not None and removed.id == "only"
    assert registry.lookup("insert", "ctrl+k") is None
    assert registry.revision() == revision + 1
    assert registry.unregister_binding("only") is None


def test_duplicate_action_rejected() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("core.test"))

    with pytest.raises(ValueError):
        registry.register_action(make_action("core.test"))


def test_resolver_match_and_miss() -> None:
    registry = build_registry([make_binding("insert.k")])
    resolver = KeymapResolver(registry)

    hit = resolver.resolve("insert", "ctrl+k")
    miss = resolver.resolve("insert", "k")

    assert hit.status == "match"
    assert hit.match is not None
    assert hit.match.binding.id == "insert.k"
    assert hit.match.action.id == "core.test"
    assert miss.status == "miss"
    assert miss.match is None


def test_default_keymaps_register_every_binding() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    stats = registry.stats()
    assert stats.action_count == len(DEFAULT_ACTIONS)
    assert stats.binding_count == len(DEFAULT_BINDINGS)
    assert stats.modes == ("command", "confirm_exit", "filename_prompt", "insert")
    assert registry.lookup("insert", "ctrl+y").action_id == "edit.redo"
    assert registry.lookup("confirm_exit", "Y").action_id == "confirm.save"


def test_default_keymaps_can_be_limited_to_modes() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry, modes=("command",))

    assert registry.stats().modes == ("command",)
    assert {b.id for b in registry.iter_bindings("command")} == {
        "command.ENTER",
        "command.ESC",
        "command.BACKSPACE",
    }


def test_every_exported_action_is_registered() -> None:
    import minedit.actions as actions

    handlers = {action.handler for action in DEFAULT_ACTIONS}
    exported = {
        getattr(actions, name) for name in actions.__all__ if name != "save_buffer"
    }

    assert exported == handlers
