"""Lexer."""

from linewrap.lexer.classify import (
    WhitespaceMeasure,
    is_line_break,
    is_whitespace,
)
from linewrap.lexer.lexer import Lexer, dump_tokens, lex
from linewrap.lexer.tokens import Token, TokenFlags, TokenKind

__all__ = [
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "WhitespaceMeasure",
    "dump_tokens",
    "is_line_break",
    "is_whitespace",
    "lex",
]
