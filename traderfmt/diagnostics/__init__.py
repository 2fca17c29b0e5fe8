"""Diagnostics."""

from traderfmt.diagnostics.codes import (
    IO_INVALID_PATH,
    IO_READ_FAILED,
    PARSER_CURSOR_ADVANCE,
    PARSER_MALFORMED_CATEGORY_ROW,
    PARSER_UNCLOSED_TAG,
    DiagnosticSpec,
)
from traderfmt.diagnostics.diagnostic import Diagnostic, Severity

__all__ = [
    "IO_INVALID_PATH",
    "IO_READ_FAILED",
    "PARSER_CURSOR_ADVANCE",
    "PARSER_MALFORMED_CATEGORY_ROW",
    "PARSER_UNCLOSED_TAG",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
]
