"""Recursive-descent parser (cursor + grammar probes)."""

from traderfmt.parser.cursor import Cursor, CursorCheckpoint
from traderfmt.parser.grammar import (
    DocumentParse,
    parse_category,
    parse_category_item,
    parse_comment,
    parse_csv_line,
    parse_currency,
    parse_currency_name,
    parse_document,
    parse_file_end,
    parse_line,
    parse_open_file,
    parse_tag,
    parse_token,
    parse_trader,
)
from traderfmt.parser.trader import parse, parse_result

__all__ = [
    "Cursor",
    "CursorCheckpoint",
    "DocumentParse",
    "parse",
    "parse_category",
    "parse_category_item",
    "parse_comment",
    "parse_csv_line",
    "parse_currency",
    "parse_currency_name",
    "parse_document",
    "parse_file_end",
    "parse_line",
    "parse_open_file",
    "parse_result",
    "parse_tag",
    "parse_token",
    "parse_trader",
]
