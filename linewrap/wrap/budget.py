"""Remaining-width bookkeeping for the line being built."""

from linewrap.wrap.options import WrapOptions


class LineBudget:
    def __init__(self, options: WrapOptions) -> None:
        self._options = options
        self._remaining = options.width_after_indent(first_line=True)

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def fresh_width(self) -> int:
        """Width available on a row after the first."""
        return self._options.width_after_indent(first_line=False)

    def reset(self, first_line: bool) -> None:
        self._remaining = self._options.width_after_indent(first_line)

    def charge(self, n: int) -> None:
        self._remaining = max(self._remaining - n, 0)

    def would_overflow(self, n: int) -> bool:
        return n > self._remaining

    def has_room_for(self, n: int) -> bool:
        return not self.would_overflow(n)

    def copy(self) -> "LineBudget":
        budget = LineBudget(self._options)
        budget._remaining = self._remaining
        return budget
