"""Diagnostics core types."""

from dataclasses import dataclass

from sexpy.diagnostics.codes import DiagnosticSpec, Severity
from sexpy.text import LineIndex, TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and parser."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        range: TextRange,
        *,
        severity: Severity | None = None,
        message: str | None = None,
    ) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=message if message is not None else spec.message,
            range=range,
            severity=severity if severity is not None else spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    def render(self, line_index: LineIndex | None = None) -> str:
        """One-line description, with `line:col` when a line index is given."""
        if line_index is not None:
            line, col = line_index.line_col(self.range.start)
            location = f"{line}:{col}"
        else:
            location = f"offset {self.range.start.value}"
        return f"{location}: {self.severity} {self.code}: {self.message}"
