"""Key binding specification language for terminal UIs."""

__all__ = [
    "adapters",
    "keymaps",
    "runtime",
]

__version__ = "0.1.0"
