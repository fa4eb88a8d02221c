"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag

from linewrap.text import TextRange


class TokenKind(IntEnum):
    EOF = 1

    WHITESPACE = 10
    WORD = 20


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    TRUNCATED = 1 << 0  # word prefix emitted before its end was seen
    HAS_LINE_BREAK = 1 << 1  # whitespace run contained CR/LF


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed run.

    Words carry their text. Whitespace runs carry only what layout needs: the
    `width` the run occupies on an output line after tab expansion and line
    break folding, and the number of source `line_breaks`. `range` is the
    rune range of the raw run in the input stream and `byte_length` the
    number of input bytes it consumed.
    """

    kind: TokenKind
    text: str
    range: TextRange
    byte_length: int = 0
    width: int = 0
    line_breaks: int = 0
    flags: TokenFlags = TokenFlags.NONE

    @property
    def is_truncated(self) -> bool:
        return bool(self.flags & TokenFlags.TRUNCATED)

    def has_line_break(self) -> bool:
        return bool(self.flags & TokenFlags.HAS_LINE_BREAK)
