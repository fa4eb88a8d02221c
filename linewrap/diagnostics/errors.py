"""Exceptions raised by the wrapper.

Every exception carries the `DiagnosticSpec` describing it, so callers can
switch on a stable `code` instead of parsing messages.
"""

from __future__ import annotations

from linewrap.diagnostics.codes import (
    CONFIG_INDENT_TOO_WIDE,
    DECODE_INVALID_UTF8,
    STREAM_READ_FAILED,
    DiagnosticSpec,
)


class WrapError(Exception):
    """Base class for wrapper errors."""

    spec: DiagnosticSpec | None = None

    def __init__(self, message: str | None = None, *, spec: DiagnosticSpec | None = None) -> None:
        if spec is not None:
            self.spec = spec
        if message is None and self.spec is not None:
            message = self.spec.message
        super().__init__(message or "")

    @property
    def code(self) -> str | None:
        return self.spec.code if self.spec is not None else None

    @property
    def hint(self) -> str | None:
        return self.spec.hint if self.spec is not None else None


class ConfigError(WrapError, ValueError):
    """Invalid width/indent/separator combination."""


class IndentTooWideError(ConfigError):
    spec = CONFIG_INDENT_TOO_WIDE


class DecodingError(WrapError, ValueError):
    """Malformed UTF-8 input. `offset` is the absolute byte offset of the bad sequence."""

    spec = DECODE_INVALID_UTF8

    def __init__(self, message: str | None = None, *, offset: int, spec: DiagnosticSpec | None = None) -> None:
        super().__init__(message, spec=spec)
        self.offset = offset


class StreamReadError(WrapError):
    """The input source failed; the original exception is chained as `__cause__`.

    `partial_output` holds the text wrapped from everything read before the
    failure, as it would read if the input had ended there.
    """

    spec = STREAM_READ_FAILED

    def __init__(self, message: str | None = None, *, partial_output: str = "") -> None:
        super().__init__(message)
        self.partial_output = partial_output
