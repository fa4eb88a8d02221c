"""Diagnostics core types."""

from dataclasses import dataclass

from linewrap.diagnostics.codes import DiagnosticSpec, Severity
from linewrap.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured, non-fatal finding emitted while wrapping."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=spec.message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
