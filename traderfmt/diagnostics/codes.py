"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_UNCLOSED_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNCLOSED_TAG",
    message="Unclosed tag: line ended before `>` or `/`.",
    hint="Close the tag on the same line, e.g. `<Trader> Name`.",
    severity="error",
    category="parser",
)

PARSER_MALFORMED_CATEGORY_ROW: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MALFORMED_CATEGORY_ROW",
    message="Malformed category row: expected 4 comma-separated fields.",
    hint="Category rows look like `class,amount,buy_value,sell_value`.",
    severity="error",
    category="parser",
)

PARSER_CURSOR_ADVANCE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_CURSOR_ADVANCE",
    message="Unexpected end of input while consuming a tag.",
    severity="error",
    category="parser",
)

IO_INVALID_PATH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="IO_INVALID_PATH",
    message="The path provided is not valid.",
    hint="Pass the path of an existing trader config file.",
    severity="error",
    category="io",
)

IO_READ_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="IO_READ_FAILED",
    message="Error reading file.",
    severity="error",
    category="io",
)
