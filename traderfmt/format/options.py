"""Formatter configuration."""

from dataclasses import dataclass
from enum import StrEnum


class IndentStyle(StrEnum):
    """How comments nested inside blocks are indented."""

    # Comments use the same space indentation as sibling data lines.
    SPACES = "spaces"
    # Parent's four-space prefix followed by one tab per nesting level.
    MIXED = "mixed"


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Layout rules for the canonical rendering."""

    indent_style: IndentStyle = IndentStyle.SPACES
    currency_column_width: int = 60
    indent: str = "    "

    def __post_init__(self) -> None:
        if self.currency_column_width < 0:
            raise ValueError("currency_column_width cannot be negative")

    @staticmethod
    def for_style(style: IndentStyle | str) -> "FormatOptions":
        return FormatOptions(indent_style=IndentStyle(style))
