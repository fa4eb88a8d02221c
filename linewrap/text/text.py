from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Rune count or rune offset into the decoded input stream."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def of(text: str) -> "TextSize":
        """Create a TextSize from a string's rune count."""
        return TextSize(len(text))

    @staticmethod
    def from_int(value: int) -> "TextSize":
        return TextSize(value)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) of rune offsets in the input stream.

    Invariant:
    - 0 <= start <= end

    Offsets count decoded runes from the start of the stream, not bytes, so
    they stay valid across chunk boundaries that split a multi-byte rune.
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def at(offset: TextSize, length: TextSize) -> "TextRange":
        """Range of `length` runes starting at `offset`."""
        return TextRange(offset.value, offset.value + length.value)

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        return TextRange(offset.value, offset.value)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def is_empty(self) -> bool:
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        return (self._start, self._end)

    def sub_range(self, offset: int, length: int) -> "TextRange":
        """Range of `length` runes starting `offset` runes into this range."""
        start = self._start + offset
        end = start + length
        if end > self._end:
            raise ValueError("Sub-range extends past the end of the range")
        return TextRange(start, end)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def byte_length(text: str) -> int:
    """Number of bytes `text` occupies when encoded as UTF-8."""
    return len(text.encode("utf-8"))
