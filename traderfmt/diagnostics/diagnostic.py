"""Diagnostics core types."""

from __future__ import annotations

from dataclasses import dataclass

from traderfmt.diagnostics.codes import DiagnosticSpec, Severity
from traderfmt.text import TextRange, line_column


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured description of a parse or file-system failure."""

    code: str
    message: str
    range: TextRange | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        *,
        range: TextRange | None = None,
        detail: str | None = None,
    ) -> Diagnostic:
        message = spec.message if detail is None else f"{spec.message} {detail}"
        return Diagnostic(
            code=spec.code,
            message=message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    def render(self, source: str | None = None, path: str | None = None) -> str:
        """One-line message, prefixed with `path:line:col` when known."""
        location: list[str] = []
        if path is not None:
            location.append(path)
        if source is not None and self.range is not None:
            line, column = line_column(source, self.range.start)
            location.append(f"{line}:{column}")
        prefix = ":".join(location)
        text = f"{self.severity}[{self.code}]: {self.message}"
        return f"{prefix}: {text}" if prefix else text
