"""Incremental lexer over a UTF-8 byte stream."""

import codecs
import re
from dataclasses import dataclass

from linewrap.diagnostics import DECODE_TRUNCATED_UTF8, DecodingError
from linewrap.lexer.classify import WHITESPACE_RUNE, WORD_RUNE, WhitespaceMeasure, is_whitespace
from linewrap.lexer.tokens import Token, TokenFlags, TokenKind
from linewrap.text import TextRange, TextSize, byte_length


@dataclass(slots=True)
class _HeldWhitespace:
    """Whitespace run consumed from the buffer but not yet emitted."""

    start: int
    length: int
    byte_length: int
    measure: WhitespaceMeasure

    def copy(self) -> "_HeldWhitespace":
        return _HeldWhitespace(self.start, self.length, self.byte_length, self.measure.copy())


class Lexer:
    """Splits input into alternating whitespace and word runs.

    Input arrives through `feed` in arbitrary chunks. A run that reaches the
    end of the buffered input is not emitted until a terminating rune arrives
    or the input is closed, so the token stream does not depend on where the
    chunk boundaries fall. Whitespace is measured as it arrives, so a held
    whitespace run costs constant memory whatever its length.
    """

    def __init__(
        self,
        *,
        tab_width: int = 1,
        fold_line_breaks: bool = True,
        max_word_length: int | None = None,
    ) -> None:
        self._tab_width = tab_width
        self._fold_line_breaks = fold_line_breaks
        self._max_word_length = max_word_length
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
        self._buffer = ""
        self._cursor = 0
        self._position = 0
        self._byte_position = 0
        self._bytes_fed = 0
        self._held: _HeldWhitespace | None = None
        self._closed = False

    @property
    def position(self) -> int:
        """Rune offset of the next unconsumed rune."""
        return self._position

    @property
    def byte_position(self) -> int:
        """Byte offset of the next unconsumed rune."""
        return self._byte_position

    @property
    def bytes_fed(self) -> int:
        """Total bytes passed to `feed`."""
        return self._bytes_fed

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def has_pending_input(self) -> bool:
        return (
            self._cursor < len(self._buffer)
            or self._held is not None
            or bool(self._decoder.getstate()[0])
        )

    def feed(self, data: bytes | str) -> None:
        if self._closed:
            raise RuntimeError("Cannot feed a closed lexer")
        if isinstance(data, str):
            data = data.encode("utf-8")
        pending = len(self._decoder.getstate()[0])
        try:
            text = self._decoder.decode(data)
        except UnicodeDecodeError as exc:
            offset = self._bytes_fed - pending + exc.start
            raise DecodingError(f"Invalid UTF-8 sequence at byte {offset}", offset=offset) from exc
        self._bytes_fed += len(data)
        self._append(text)

    def close(self) -> None:
        """Mark the end of input. Buffered runs become final."""
        if self._closed:
            return
        pending = len(self._decoder.getstate()[0])
        try:
            text = self._decoder.decode(b"", final=True)
        except UnicodeDecodeError as exc:
            offset = self._bytes_fed - pending
            raise DecodingError(
                f"Input ended inside a {pending}-byte partial UTF-8 sequence at byte {offset}",
                offset=offset,
                spec=DECODE_TRUNCATED_UTF8,
            ) from exc
        self._append(text)
        self._closed = True

    def next_token(self) -> Token | None:
        """Next complete token, an EOF token once closed and drained, or None if more input is needed."""
        if self._cursor < len(self._buffer) and is_whitespace(self._buffer[self._cursor]):
            self._hold_whitespace(self._run_end(WORD_RUNE))

        if self._cursor >= len(self._buffer):
            if not self._closed:
                return None
            if self._held is not None:
                return self._release_whitespace()
            return Token(TokenKind.EOF, "", TextRange.empty(TextSize.from_int(self._position)))

        if self._held is not None:
            return self._release_whitespace()

        end = self._run_end(WHITESPACE_RUNE)
        if end == len(self._buffer) and not self._closed:
            if self._max_word_length is not None and end - self._cursor > self._max_word_length:
                return self._take_word(end, TokenFlags.TRUNCATED)
            return None
        return self._take_word(end, TokenFlags.NONE)

    def push_back(self, text: str) -> None:
        """Re-present `text`, the unplaced tail of the last token, ahead of the buffered input."""
        if not text:
            return
        if len(text) > self._position:
            raise ValueError("Cannot push back more text than was consumed")
        self._buffer = text + self._buffer[self._cursor :]
        self._cursor = 0
        self._position -= len(text)
        self._byte_position -= byte_length(text)

    def fork(self) -> "Lexer":
        """Copy of this lexer closed at the current input.

        Bytes of a partial rune still held by the decoder are not carried over.
        """
        forked = Lexer(
            tab_width=self._tab_width,
            fold_line_breaks=self._fold_line_breaks,
            max_word_length=self._max_word_length,
        )
        forked._buffer = self._buffer[self._cursor :]
        forked._position = self._position
        forked._byte_position = self._byte_position
        forked._bytes_fed = self._bytes_fed
        forked._held = self._held.copy() if self._held is not None else None
        forked._closed = True
        return forked

    def _append(self, text: str) -> None:
        if not text:
            return
        self._buffer = self._buffer[self._cursor :] + text
        self._cursor = 0

    def _run_end(self, terminator: re.Pattern[str]) -> int:
        found = terminator.search(self._buffer, self._cursor)
        return found.start() if found is not None else len(self._buffer)

    def _hold_whitespace(self, end: int) -> None:
        raw = self._buffer[self._cursor : end]
        if self._held is None:
            self._held = _HeldWhitespace(
                self._position,
                0,
                0,
                WhitespaceMeasure(self._tab_width, self._fold_line_breaks),
            )
        consumed = byte_length(raw)
        self._held.measure.add(raw)
        self._held.length += len(raw)
        self._held.byte_length += consumed

        self._cursor = end
        self._position += len(raw)
        self._byte_position += consumed

    def _release_whitespace(self) -> Token:
        held = self._held
        self._held = None
        flags = TokenFlags.HAS_LINE_BREAK if held.measure.line_breaks else TokenFlags.NONE
        return Token(
            TokenKind.WHITESPACE,
            "",
            TextRange.at(TextSize.from_int(held.start), TextSize.from_int(held.length)),
            byte_length=held.byte_length,
            width=held.measure.width,
            line_breaks=held.measure.line_breaks,
            flags=flags,
        )

    def _take_word(self, end: int, flags: TokenFlags) -> Token:
        text = self._buffer[self._cursor : end]
        consumed = byte_length(text)
        token = Token(
            TokenKind.WORD,
            text,
            TextRange.at(TextSize.from_int(self._position), TextSize.of(text)),
            byte_length=consumed,
            width=len(text),
            flags=flags,
        )
        self._cursor = end
        self._position += len(text)
        self._byte_position += consumed
        return token


def lex(
    text: str | bytes,
    *,
    tab_width: int = 1,
    fold_line_breaks: bool = True,
) -> list[Token]:
    """Tokenize a complete input, ending with the EOF token."""
    lexer = Lexer(tab_width=tab_width, fold_line_breaks=fold_line_breaks)
    lexer.feed(text)
    lexer.close()

    tokens: list[Token] = []
    while (token := lexer.next_token()) is not None:
        tokens.append(token)
        if token.kind == TokenKind.EOF:
            break
    return tokens


def dump_tokens(tokens: list[Token]) -> None:
    """Print token list with kind, range, byte length, width, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        print(
            f"{i:03d} {tok.kind.name:<10} range={tok.range.as_tuple()} "
            f"bytes={tok.byte_length} width={tok.width} breaks={tok.line_breaks} "
            f"flags={tok.flags!r} text={tok.text!r}"
        )
