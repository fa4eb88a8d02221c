"""Rune offsets and ranges."""

from linewrap.text.text import TextRange, TextSize, byte_length

__all__ = [
    "TextRange",
    "TextSize",
    "byte_length",
]
