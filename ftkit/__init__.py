"""Helpers for characters, numbers, strings, byte buffers, linked lists and line reading."""

__version__ = "0.1.0"

__all__ = [
    "build",
    "chars",
    "copy_ops",
    "linked",
    "memory",
    "numbers",
    "output",
    "reader",
    "search",
]