"""Canonical formatter."""

from traderfmt.format.options import FormatOptions, IndentStyle
from traderfmt.format.render import (
    format_category,
    format_category_item,
    format_comment,
    format_csv_line,
    format_currency_name,
    format_line,
    format_nested_comment,
    format_token,
    format_tokens,
    format_trader,
    iter_formatted,
)

__all__ = [
    "FormatOptions",
    "IndentStyle",
    "format_category",
    "format_category_item",
    "format_comment",
    "format_csv_line",
    "format_currency_name",
    "format_line",
    "format_nested_comment",
    "format_token",
    "format_tokens",
    "format_trader",
    "iter_formatted",
]
