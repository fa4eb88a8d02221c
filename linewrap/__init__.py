"""UTF-8 text line wrapping."""

from linewrap.diagnostics import (
    ConfigError,
    DecodingError,
    Diagnostic,
    IndentTooWideError,
    StreamReadError,
    WrapError,
)
from linewrap.pipeline import WrapRunResult, run_wrap, run_wrap_stream
from linewrap.wrap import (
    DEFAULT_COLUMN_WIDTH,
    WrapOptions,
    Wrapper,
    configure,
    wrap_from_stream,
    wrap_text,
)

__all__ = [
    "DEFAULT_COLUMN_WIDTH",
    "ConfigError",
    "DecodingError",
    "Diagnostic",
    "IndentTooWideError",
    "StreamReadError",
    "WrapError",
    "WrapOptions",
    "WrapRunResult",
    "Wrapper",
    "configure",
    "run_wrap",
    "run_wrap_stream",
    "wrap_from_stream",
    "wrap_text",
]
