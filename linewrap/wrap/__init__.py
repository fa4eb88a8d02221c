"""Line breaking, configuration and the public wrapper."""

from linewrap.wrap.breaker import LineBreaker, LineState
from linewrap.wrap.budget import LineBudget
from linewrap.wrap.buffer import OutputBuffer
from linewrap.wrap.options import (
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_LINE_SEPARATOR,
    DEFAULT_TAB_WIDTH,
    WrapOptions,
)
from linewrap.wrap.session import WrapSession
from linewrap.wrap.wrapper import (
    DEFAULT_CHUNK_SIZE,
    ChunkSource,
    Wrapper,
    configure,
    wrap_from_stream,
    wrap_stream_into,
    wrap_text,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_COLUMN_WIDTH",
    "DEFAULT_LINE_SEPARATOR",
    "DEFAULT_TAB_WIDTH",
    "ChunkSource",
    "LineBreaker",
    "LineBudget",
    "LineState",
    "OutputBuffer",
    "WrapOptions",
    "WrapSession",
    "Wrapper",
    "configure",
    "wrap_from_stream",
    "wrap_stream_into",
    "wrap_text",
]
