"""One wrap run: a lexer feeding a line breaker."""

import logging

from linewrap.diagnostics import Diagnostic
from linewrap.lexer import Lexer, TokenKind
from linewrap.wrap.breaker import LineBreaker
from linewrap.wrap.options import WrapOptions

logger = logging.getLogger(__name__)


class WrapSession:
    """Mutable state of a single wrap run.

    Chunks can be fed until `finish`. Between chunks the session keeps any
    partial rune, the pending whitespace decision and the remaining width, so
    input may be split at any byte.
    """

    def __init__(self, options: WrapOptions) -> None:
        self._options = options
        self._lexer = Lexer(
            tab_width=options.tab_width,
            fold_line_breaks=options.fold_line_breaks,
            max_word_length=options.column_width,
        )
        self._breaker = LineBreaker(options)
        self._finished = False

    @property
    def options(self) -> WrapOptions:
        return self._options

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._breaker.diagnostics

    @property
    def bytes_read(self) -> int:
        return self._lexer.bytes_fed

    def feed(self, data: bytes | str) -> None:
        if self._finished:
            raise RuntimeError("Wrap session already finished; reset it before adding more text")
        self._lexer.feed(data)
        self._drain(self._lexer, self._breaker)

    def finish(self) -> str:
        if not self._finished:
            self._lexer.close()
            self._drain(self._lexer, self._breaker)
            self._finished = True
            logger.debug(
                "Wrapped %d bytes into %d lines (%d hard splits)",
                self._lexer.byte_position,
                self._breaker.line_count,
                len(self._breaker.diagnostics),
            )
        return self._breaker.output()

    def preview(self) -> str:
        """Output as it would read if the input ended now. The session is left open."""
        if self._finished:
            return self._breaker.output()
        lexer = self._lexer.fork()
        breaker = self._breaker.fork()
        self._drain(lexer, breaker)
        return breaker.output()

    @staticmethod
    def _drain(lexer: Lexer, breaker: LineBreaker) -> None:
        while (token := lexer.next_token()) is not None:
            lexer.push_back(breaker.accept(token))
            if token.kind == TokenKind.EOF:
                break
