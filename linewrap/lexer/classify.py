"""Rune classification and whitespace measurement."""

import re
from dataclasses import dataclass

TAB = "\t"
LINE_BREAK_RUNES = frozenset("\r\n")
# U+001C..U+001F pass str.isspace but are not Unicode White_Space.
INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")

WHITESPACE_RUNE = re.compile(r"[^\S\x1c-\x1f]")
WORD_RUNE = re.compile(r"[\S\x1c-\x1f]")
_LINE_BREAK_RUN = re.compile(r"[\r\n]+")


def is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in INFORMATION_SEPARATORS


def is_line_break(ch: str) -> bool:
    return ch in LINE_BREAK_RUNES


@dataclass(slots=True)
class WhitespaceMeasure:
    """Output width and source line breaks of one whitespace run, fed in pieces.

    Tabs count `tab_width` columns. With `fold_line_breaks`, every run of
    adjacent CR/LF runes counts as one column; otherwise each line-break rune
    counts one. Other whitespace counts one column. A CRLF pair counts as a
    single line break, also when the pieces split it.
    """

    tab_width: int
    fold_line_breaks: bool
    width: int = 0
    line_breaks: int = 0
    previous: str = ""

    def add(self, run: str) -> None:
        if not run:
            return
        breaks = run.count("\r") + run.count("\n") - run.count("\r\n")
        if self.previous == "\r" and run[0] == "\n":
            breaks -= 1

        width = len(run) + run.count(TAB) * (self.tab_width - 1)
        if self.fold_line_breaks:
            for match in _LINE_BREAK_RUN.finditer(run):
                width -= len(match.group()) - 1
            if is_line_break(self.previous) and is_line_break(run[0]):
                width -= 1

        self.width += width
        self.line_breaks += breaks
        self.previous = run[-1]

    def copy(self) -> "WhitespaceMeasure":
        return WhitespaceMeasure(
            self.tab_width,
            self.fold_line_breaks,
            self.width,
            self.line_breaks,
            self.previous,
        )
