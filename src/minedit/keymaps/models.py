"""Dataclasses describing key strokes, bindings and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping


def normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def stroke_token(key: str, modifiers: Iterable[str] = ()) -> str:
    """``"c"`` + ``("CTRL",)`` -> ``"ctrl+c"``; bare keys pass through."""

    mods = normalize_modifiers(modifiers)
    if mods:
        return "+".join(mods) + f"+{key}"
    return key


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        return stroke_token(self.key, self.modifiers)

    @classmethod
    def parse(cls, spec: str) -> "KeyStroke":
        """Build from ``"ctrl+z"`` style text; a lone ``"+"`` is a plain key."""

        *mods, key = spec.split("+") if spec != "+" else ["+"]
        return cls(key=key, modifiers=tuple(mods))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one stroke in one mode with an action id."""

    id: str
    mode: str
    stroke: KeyStroke
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = [
    "KeyStroke",
    "ActionRef",
    "Binding",
    "normalize_modifiers",
    "stroke_token",
]
