"""Parser and canonical formatter for DayZ trader config files."""

from traderfmt.format import FormatOptions, IndentStyle, format_tokens
from traderfmt.parser import parse, parse_result
from traderfmt.pipeline import run_format

__all__ = [
    "FormatOptions",
    "IndentStyle",
    "format_tokens",
    "parse",
    "parse_result",
    "run_format",
]
