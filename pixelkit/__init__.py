"""Helpers for characters, strings, buffers, colours, vectors, textures and line drawing."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "chars",
    "color",
    "keymap",
    "linked",
    "lines",
    "memory",
    "numbers",
    "output",
    "quaternion",
    "search",
    "text",
    "texture",
    "trace",
    "vector",
]