"""Public wrapping API."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final, Protocol

from linewrap.diagnostics import Diagnostic, StreamReadError
from linewrap.wrap.options import DEFAULT_COLUMN_WIDTH, DEFAULT_LINE_SEPARATOR, DEFAULT_TAB_WIDTH, WrapOptions
from linewrap.wrap.session import WrapSession

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE: Final[int] = 64 * 1024


class ChunkSource(Protocol):
    """Pull-based byte source; `read` returns an empty chunk at end of stream."""

    def read(self, size: int = -1, /) -> bytes: ...


class Wrapper:
    """UTF-8 text line wrapper.

    Text is broken into runs of whitespace and runs of non-whitespace
    ("words"). Tabs become `tab_width` spaces and, unless line breaks are
    kept, every run of CR/LF becomes a single space. Words are laid out
    left to right; whitespace between two words on the same line is kept
    (each whitespace rune rendered as a space), whitespace at a wrap point, at
    the start of a line and at the end of the text is dropped. A word longer
    than a whole line is split at the column width. Each row starts with its
    indent, which counts against the row's width.

    `wrap_text`, `wrap_lines` and `wrap_from_stream` are one-shot and use
    their own session. `add_text`, `accumulated_output`, `finish` and `reset`
    share one long-lived session.
    """

    def __init__(self, options: WrapOptions | None = None) -> None:
        self._options = options if options is not None else WrapOptions()
        self._session = WrapSession(self._options)

    @property
    def options(self) -> WrapOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Diagnostics of the incremental session."""
        return self._session.diagnostics

    def wrap_text(self, text: str | bytes) -> str:
        session = WrapSession(self._options)
        session.feed(text)
        return session.finish()

    def wrap_lines(self, text: str | bytes) -> list[str]:
        wrapped = self.wrap_text(text)
        if not wrapped:
            return []
        return wrapped.split(self._options.line_separator)

    def wrap_from_stream(
        self,
        source: ChunkSource | Iterable[bytes],
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> str:
        """Wrap everything `source` yields until end of stream.

        Errors raised by the source abort wrapping and surface as
        `StreamReadError`; the output wrapped so far is attached to it.
        """
        session = WrapSession(self._options)
        wrap_stream_into(session, source, chunk_size=chunk_size)
        return session.finish()

    def add_text(self, chunk: bytes | str) -> None:
        self._session.feed(chunk)

    def accumulated_output(self) -> str:
        """Text wrapped so far, as it would read if the input ended now."""
        return self._session.preview()

    def finish(self) -> str:
        """End the incremental input and return the final text."""
        return self._session.finish()

    def reset(self) -> None:
        logger.debug("Resetting wrap session")
        self._session = WrapSession(self._options)


def wrap_stream_into(
    session: WrapSession,
    source: ChunkSource | Iterable[bytes],
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> None:
    """Feed every chunk of `source` into `session` without finishing it."""
    if chunk_size <= 0:
        raise ValueError("chunk_size must be >= 1")

    for chunk in _iter_chunks(source, chunk_size, session):
        logger.debug("Read %d-byte chunk", len(chunk))
        session.feed(chunk)


def _iter_chunks(
    source: ChunkSource | Iterable[bytes],
    chunk_size: int,
    session: WrapSession,
) -> Iterable[bytes]:
    read = getattr(source, "read", None)
    iterator = iter(source) if read is None else None  # type: ignore[arg-type]
    while True:
        try:
            if read is not None:
                chunk = read(chunk_size)
                if not chunk:
                    return
            else:
                chunk = next(iterator)  # type: ignore[arg-type]
        except StopIteration:
            return
        except Exception as exc:
            raise StreamReadError(
                f"Reading input failed after {session.bytes_read} bytes: {exc}",
                partial_output=session.preview(),
            ) from exc
        if chunk:
            yield chunk


def configure(
    column_width: int = DEFAULT_COLUMN_WIDTH,
    first_row_indent: str = "",
    subsequent_row_indent: str = "",
    fold_line_breaks: bool = True,
    tab_width: int = DEFAULT_TAB_WIDTH,
    line_separator: str = DEFAULT_LINE_SEPARATOR,
) -> Wrapper:
    """Build a Wrapper; raises IndentTooWideError when an indent does not fit the width."""
    return Wrapper(
        WrapOptions(
            column_width=column_width,
            first_row_indent=first_row_indent,
            subsequent_row_indent=subsequent_row_indent,
            fold_line_breaks=fold_line_breaks,
            tab_width=tab_width,
            line_separator=line_separator,
        )
    )


def wrap_text(text: str | bytes, options: WrapOptions | None = None) -> str:
    return Wrapper(options).wrap_text(text)


def wrap_from_stream(
    source: ChunkSource | Iterable[bytes],
    options: WrapOptions | None = None,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    return Wrapper(options).wrap_from_stream(source, chunk_size=chunk_size)
