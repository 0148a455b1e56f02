"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from minedit.keymaps import KeymapResolver, ResolutionMatch
from minedit.keymaps.models import stroke_token
from minedit.runtime import telemetry

from .base_mode import KeyInput, ModeContext, ModeResult


def key_to_token(key: KeyInput) -> str:
    return stroke_token(key.key, key.modifiers)


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


def execute_match(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"binding_id": match.binding.id, "action": match.action.id},
    ):
        outcome = match.action(context, match)

    if isinstance(outcome, ModeResult):
        return outcome
    return ModeResult(consumed=True)


class KeymapDispatch:
    """Mixin: look the key up in this mode's table, else hand it to ``fallback``."""

    name: str
    context: ModeContext

    def dispatch(self, key: KeyInput) -> ModeResult:
        resolver = require_keymap_resolver(self.context)
        result = resolver.resolve(self.name, key_to_token(key))
        if result.status == "match" and result.match:
            return execute_match(self.context, result.match)
        return self.fallback(key)

    def fallback(self, key: KeyInput) -> ModeResult:
        del key
        return ModeResult(consumed=False, status="miss", message="unhandled")


__all__ = [
    "KeymapDispatch",
    "execute_match",
    "key_to_token",
    "require_keymap_resolver",
]
