"""Wrapper configuration."""

from dataclasses import dataclass, replace
from typing import Final

from linewrap.diagnostics import (
    CONFIG_EMPTY_LINE_SEPARATOR,
    CONFIG_INVALID_COLUMN_WIDTH,
    CONFIG_INVALID_TAB_WIDTH,
    CONFIG_INVALID_TEXT,
    ConfigError,
    IndentTooWideError,
)

DEFAULT_COLUMN_WIDTH: Final[int] = 79
DEFAULT_TAB_WIDTH: Final[int] = 1
DEFAULT_LINE_SEPARATOR: Final[str] = "\n"


@dataclass(frozen=True, slots=True)
class WrapOptions:
    """Immutable wrap configuration, validated on construction.

    Indents count against the column width of their row, so the width must be
    larger than both of them.
    """

    column_width: int = DEFAULT_COLUMN_WIDTH
    first_row_indent: str = ""
    subsequent_row_indent: str = ""
    fold_line_breaks: bool = True
    tab_width: int = DEFAULT_TAB_WIDTH
    line_separator: str = DEFAULT_LINE_SEPARATOR

    def __post_init__(self):
        if isinstance(self.column_width, bool) or not isinstance(self.column_width, int) or self.column_width <= 0:
            raise ConfigError(
                f"Column width must be a positive integer, got {self.column_width!r}",
                spec=CONFIG_INVALID_COLUMN_WIDTH,
            )
        if isinstance(self.tab_width, bool) or not isinstance(self.tab_width, int) or self.tab_width <= 0:
            raise ConfigError(
                f"Tab width must be a positive integer, got {self.tab_width!r}",
                spec=CONFIG_INVALID_TAB_WIDTH,
            )
        for name in ("first_row_indent", "subsequent_row_indent", "line_separator"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {value!r}", spec=CONFIG_INVALID_TEXT)
        if not self.line_separator:
            raise ConfigError(spec=CONFIG_EMPTY_LINE_SEPARATOR)
        widest = max(len(self.first_row_indent), len(self.subsequent_row_indent))
        if self.column_width <= widest:
            raise IndentTooWideError(
                f"Column width {self.column_width} must be larger than the row indent strings ({widest} runes)"
            )

    def indent_for(self, first_line: bool) -> str:
        return self.first_row_indent if first_line else self.subsequent_row_indent

    def width_after_indent(self, first_line: bool) -> int:
        return self.column_width - len(self.indent_for(first_line))

    def replace(self, **changes) -> "WrapOptions":
        """Copy with `changes` applied; the result is validated again."""
        return replace(self, **changes)
