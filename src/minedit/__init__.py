"""Minimal modal terminal text editor."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "keymaps",
    "modes",
    "runtime",
]

__version__ = "0.1.0"
