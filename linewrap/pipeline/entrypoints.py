"""Wrap entrypoints returning run results."""

from __future__ import annotations

from collections.abc import Iterable

from linewrap.pipeline.results import WrapRunResult
from linewrap.wrap import DEFAULT_CHUNK_SIZE, ChunkSource, WrapOptions, WrapSession, wrap_stream_into


def run_wrap(
    text: str | bytes,
    options: WrapOptions | None = None,
    *,
    column_width: int | None = None,
) -> WrapRunResult:
    """Wrap a complete text in a single session."""
    resolved_options = _resolve_options(options, column_width)
    session = WrapSession(resolved_options)
    session.feed(text)
    wrapped_text = session.finish()

    source_text = text.decode("utf-8") if isinstance(text, bytes) else text
    return WrapRunResult(
        source_text=source_text,
        wrapped_text=wrapped_text,
        options=resolved_options,
        diagnostics=list(session.diagnostics),
        changed=wrapped_text != source_text,
    )


def run_wrap_stream(
    source: ChunkSource | Iterable[bytes],
    options: WrapOptions | None = None,
    *,
    column_width: int | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> WrapRunResult:
    """Wrap everything a byte source yields in a single session."""
    resolved_options = _resolve_options(options, column_width)
    session = WrapSession(resolved_options)
    wrap_stream_into(session, source, chunk_size=chunk_size)
    wrapped_text = session.finish()

    return WrapRunResult(
        source_text=None,
        wrapped_text=wrapped_text,
        options=resolved_options,
        diagnostics=list(session.diagnostics),
        changed=None,
    )


def _resolve_options(
    options: WrapOptions | None,
    column_width: int | None,
) -> WrapOptions:
    if options is not None and column_width is not None:
        raise ValueError("Pass either options or column_width, not both")

    if options is not None:
        return options

    if column_width is not None:
        return WrapOptions(column_width=column_width)

    return WrapOptions()
