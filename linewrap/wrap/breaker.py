"""Line-breaking decisions over the token stream."""

import logging
from enum import StrEnum

from linewrap.diagnostics import WRAP_HARD_SPLIT, Diagnostic
from linewrap.lexer.tokens import Token, TokenKind
from linewrap.wrap.budget import LineBudget
from linewrap.wrap.buffer import OutputBuffer
from linewrap.wrap.options import WrapOptions

logger = logging.getLogger(__name__)


class LineState(StrEnum):
    AT_LINE_START = "at_line_start"
    MID_LINE = "mid_line"


class LineBreaker:
    """Places words on lines, one token at a time.

    Whitespace is never written when it arrives. It is held as a pending width
    (or pending forced breaks when line breaks are kept) and only rendered once
    the following word is known to fit after it on the current line. That is
    what lets whitespace at a wrap point, at the start of a line and at the end
    of the stream disappear without retracting output.
    """

    def __init__(self, options: WrapOptions) -> None:
        self._options = options
        self._budget = LineBudget(options)
        self._buffer = OutputBuffer(options)
        self._state = LineState.AT_LINE_START
        self._pending_width = 0
        self._pending_breaks = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def state(self) -> LineState:
        return self._state

    @property
    def remaining(self) -> int:
        return self._budget.remaining

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Hard-split warnings collected so far."""
        return self._diagnostics

    @property
    def line_count(self) -> int:
        return self._buffer.line_count

    def output(self) -> str:
        return self._buffer.snapshot()

    def accept(self, token: Token) -> str:
        """Consume one token.

        Returns the unplaced tail of a truncated word, which the caller must
        present again in front of the rest of that word. For every other token
        the result is empty.
        """
        match token.kind:
            case TokenKind.WHITESPACE:
                self._hold_whitespace(token)
            case TokenKind.WORD:
                return self._place_word(token)
            case TokenKind.EOF:
                self._pending_width = 0
                self._pending_breaks = 0
        return ""

    def fork(self) -> "LineBreaker":
        forked = LineBreaker(self._options)
        forked._budget = self._budget.copy()
        forked._buffer = self._buffer.copy()
        forked._state = self._state
        forked._pending_width = self._pending_width
        forked._pending_breaks = self._pending_breaks
        forked._diagnostics = list(self._diagnostics)
        return forked

    def _hold_whitespace(self, token: Token) -> None:
        if self._state == LineState.AT_LINE_START:
            return
        if token.line_breaks and not self._options.fold_line_breaks:
            # Whatever follows the last break is leading whitespace of the next line.
            self._pending_breaks = token.line_breaks
            self._pending_width = 0
            return
        self._pending_width = token.width

    def _place_word(self, token: Token) -> str:
        if self._buffer.is_empty:
            self._buffer.append_indent(first_line=True)
        elif self._pending_breaks:
            for _ in range(self._pending_breaks - 1):
                self._buffer.append_line_break(with_indent=False)
            self._break_line()
        elif self._state == LineState.MID_LINE:
            if self._budget.has_room_for(self._pending_width + token.width):
                self._buffer.append(" " * self._pending_width)
                self._budget.charge(self._pending_width)
            else:
                self._break_line()

        self._pending_width = 0
        self._pending_breaks = 0
        return self._emit_word(token)

    def _emit_word(self, token: Token) -> str:
        text = token.text
        offset = 0

        if self._budget.would_overflow(len(text)):
            # Only reachable at the start of a line: mid-line words that do not
            # fit were already moved to a fresh line.
            while len(text) - offset > self._budget.remaining:
                fragment = text[offset : offset + self._budget.remaining]
                self._buffer.append(fragment)
                offset += len(fragment)
                self._break_line()
            split_range = token.range.sub_range(0, offset) if token.is_truncated else token.range
            self._diagnostics.append(Diagnostic.from_spec(WRAP_HARD_SPLIT, split_range))
            logger.debug("Hard split %d-rune word at %s", len(text), split_range)

        rest = text[offset:]
        if token.is_truncated:
            return rest

        self._buffer.append(rest)
        self._budget.charge(len(rest))
        self._state = LineState.MID_LINE
        return ""

    def _break_line(self) -> None:
        self._buffer.append_line_break(with_indent=True)
        self._budget.reset(first_line=False)
        self._state = LineState.AT_LINE_START
