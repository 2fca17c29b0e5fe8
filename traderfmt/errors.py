"""
Exception hierarchy for traderfmt.

Every exception carries the `Diagnostic` describing the failure so the CLI can
print a single located message without knowing which stage failed.
"""

from __future__ import annotations

from traderfmt.diagnostics import Diagnostic


class TraderFmtError(Exception):
    """Base exception for all traderfmt errors."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic


class InvalidPathError(TraderFmtError):
    """Raised when the input path is missing or not a regular file."""


class SourceReadError(TraderFmtError):
    """Raised when the input file exists but cannot be read or decoded.

    The underlying `OSError` / `UnicodeDecodeError` is chained as `__cause__`.
    """


class ParseError(TraderFmtError):
    """Raised when the parser recognises a construct it cannot finish."""


class UnclosedTagError(ParseError):
    """A `<` whose line ends before `>` or `/`."""


class MalformedRowError(ParseError):
    """A category row that does not have exactly four fields."""

    def __init__(self, diagnostic: Diagnostic, *, raw_row: str, field_count: int) -> None:
        super().__init__(diagnostic)
        self.raw_row = raw_row
        self.field_count = field_count


class CursorAdvanceError(ParseError):
    """Attempt to move the cursor past the end of input."""
