"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


CONFIG_INVALID_COLUMN_WIDTH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CONFIG_INVALID_COLUMN_WIDTH",
    message="Column width must be a positive integer.",
    severity="error",
    category="config",
)

CONFIG_INDENT_TOO_WIDE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CONFIG_INDENT_TOO_WIDE",
    message="Column width must be larger than the row indent strings.",
    hint="Shorten the indent or increase the column width.",
    severity="error",
    category="config",
)

CONFIG_INVALID_TAB_WIDTH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CONFIG_INVALID_TAB_WIDTH",
    message="Tab width must be a positive integer.",
    severity="error",
    category="config",
)

CONFIG_EMPTY_LINE_SEPARATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CONFIG_EMPTY_LINE_SEPARATOR",
    message="Line separator must not be empty.",
    hint='Use "\\n" or "\\r\\n".',
    severity="error",
    category="config",
)

CONFIG_INVALID_TEXT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CONFIG_INVALID_TEXT",
    message="Row indents and the line separator must be strings.",
    severity="error",
    category="config",
)

DECODE_INVALID_UTF8: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECODE_INVALID_UTF8",
    message="Input is not valid UTF-8.",
    hint="Re-encode the input as UTF-8 before wrapping.",
    severity="error",
    category="lexer",
)

DECODE_TRUNCATED_UTF8: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECODE_TRUNCATED_UTF8",
    message="Input ended in the middle of a UTF-8 sequence.",
    severity="error",
    category="lexer",
)

STREAM_READ_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STREAM_READ_FAILED",
    message="Reading from the input stream failed.",
    severity="error",
    category="stream",
)

WRAP_HARD_SPLIT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="WRAP_HARD_SPLIT",
    message="Word is wider than a line and was split mid-word.",
    hint="Increase the column width to keep the word intact.",
    severity="warning",
    category="wrap",
)
