"""Run result carriers for wrap entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from linewrap.diagnostics import WRAP_HARD_SPLIT, Diagnostic
from linewrap.wrap.options import WrapOptions


@dataclass(frozen=True, slots=True)
class WrapRunResult:
    """Result of one wrap run, with the diagnostics it produced.

    Stream runs do not keep their input, so `source_text` and `changed` are
    None for them.
    """

    source_text: str | None
    wrapped_text: str
    options: WrapOptions
    diagnostics: list[Diagnostic]
    changed: bool | None

    @property
    def lines(self) -> list[str]:
        if not self.wrapped_text:
            return []
        return self.wrapped_text.split(self.options.line_separator)

    @property
    def has_hard_splits(self) -> bool:
        return any(d.code == WRAP_HARD_SPLIT.code for d in self.diagnostics)
