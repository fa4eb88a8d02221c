"""Diagnostics."""

from linewrap.diagnostics.codes import (
    CONFIG_EMPTY_LINE_SEPARATOR,
    CONFIG_INDENT_TOO_WIDE,
    CONFIG_INVALID_COLUMN_WIDTH,
    CONFIG_INVALID_TAB_WIDTH,
    CONFIG_INVALID_TEXT,
    DECODE_INVALID_UTF8,
    DECODE_TRUNCATED_UTF8,
    STREAM_READ_FAILED,
    WRAP_HARD_SPLIT,
    DiagnosticSpec,
    Severity,
)
from linewrap.diagnostics.diagnostic import Diagnostic
from linewrap.diagnostics.errors import (
    ConfigError,
    DecodingError,
    IndentTooWideError,
    StreamReadError,
    WrapError,
)

__all__ = [
    "CONFIG_EMPTY_LINE_SEPARATOR",
    "CONFIG_INDENT_TOO_WIDE",
    "CONFIG_INVALID_COLUMN_WIDTH",
    "CONFIG_INVALID_TAB_WIDTH",
    "CONFIG_INVALID_TEXT",
    "DECODE_INVALID_UTF8",
    "DECODE_TRUNCATED_UTF8",
    "STREAM_READ_FAILED",
    "WRAP_HARD_SPLIT",
    "ConfigError",
    "DecodingError",
    "Diagnostic",
    "DiagnosticSpec",
    "IndentTooWideError",
    "Severity",
    "StreamReadError",
    "WrapError",
]
