"""Append-only accumulator for wrapped output."""

from linewrap.wrap.options import WrapOptions


class OutputBuffer:
    """Collects emitted text, line separators and indents.

    Nothing is ever removed: the line breaker decides on a token before
    writing it.
    """

    def __init__(self, options: WrapOptions) -> None:
        self._options = options
        self._parts: list[str] = []
        self._line_count = 0

    @property
    def is_empty(self) -> bool:
        return not self._parts

    @property
    def line_count(self) -> int:
        """Number of lines started so far."""
        return self._line_count

    def append(self, text: str) -> None:
        if text:
            self._parts.append(text)

    def append_indent(self, first_line: bool) -> None:
        if first_line:
            self._line_count = 1
        self.append(self._options.indent_for(first_line))

    def append_line_break(self, with_indent: bool = True) -> None:
        self._parts.append(self._options.line_separator)
        self._line_count += 1
        if with_indent:
            self.append(self._options.subsequent_row_indent)

    def snapshot(self) -> str:
        text = "".join(self._parts)
        self._parts = [text] if text else []
        return text

    def copy(self) -> "OutputBuffer":
        buffer = OutputBuffer(self._options)
        buffer._parts = list(self._parts)
        buffer._line_count = self._line_count
        return buffer
