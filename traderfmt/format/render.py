"""Canonical text rendering of the token tree."""

from __future__ import annotations

from collections.abc import Iterable

from traderfmt.ast import (
    CategoryItem,
    Comment,
    CSVLine,
    Currency,
    CurrencyName,
    FileEnd,
    Line,
    OpenFile,
    Token,
    Trader,
    TraderCategory,
)
from traderfmt.format.options import FormatOptions, IndentStyle


def format_comment(comment: Comment) -> str:
    return f"// {comment.message}"


def format_line(line: Line) -> str:
    comment = format_comment(line.comment) if line.comment is not None else ""
    return f"{line.text} {comment}\n"


def format_csv_line(row: CSVLine, options: FormatOptions) -> str:
    """Currency row: every field (with its comma) left-aligned in a fixed-width column."""
    width = options.currency_column_width
    last = len(row.values) - 1
    cells = [
        (value if index == last else f"{value},").ljust(width)
        for index, value in enumerate(row.values)
    ]
    text = "".join(cells)
    if row.comment is not None:
        text += f" {format_comment(row.comment)}"
    return f"{text}\n"


def format_category_item(item: CategoryItem, options: FormatOptions) -> str:
    text = options.indent * 2 + ",".join(item.values)
    if item.comment is not None:
        text += f" {format_comment(item.comment)}"
    return text


def format_nested_comment(comment: Comment, depth: int, options: FormatOptions) -> str:
    match options.indent_style:
        case IndentStyle.SPACES:
            prefix = options.indent * depth
        case IndentStyle.MIXED:
            prefix = options.indent + "\t" * depth
        case _:
            raise ValueError(f"Unknown indent style: {options.indent_style!r}")
    return f"{prefix}{format_comment(comment)}\n"


def format_currency_name(block: CurrencyName, options: FormatOptions) -> str:
    parts = [f"<CurrencyName> {format_line(block.name)}"]
    for entry in block.currencies:
        match entry:
            case Comment():
                parts.append(format_nested_comment(entry, 1, options))
            case Currency(row=row):
                parts.append(f"{options.indent}<Currency> {format_csv_line(row, options)}")
            case _:
                raise ValueError(f"Not a currency table entry: {entry!r}")
    return "".join(parts)


def format_category(category: TraderCategory, options: FormatOptions) -> str:
    parts = [f"{options.indent}<Category> {format_line(category.name)}"]
    for entry in category.items:
        match entry:
            case Comment():
                parts.append(format_nested_comment(entry, 2, options))
            case CategoryItem():
                parts.append(f"{format_category_item(entry, options)}\n")
            case _:
                raise ValueError(f"Not a category entry: {entry!r}")
    return "".join(parts)


def format_trader(trader: Trader, options: FormatOptions) -> str:
    parts = [f"<Trader> {format_line(trader.name)}"]
    for entry in trader.categories:
        match entry:
            case Comment():
                parts.append(format_nested_comment(entry, 1, options))
            case TraderCategory():
                parts.append(format_category(entry, options))
            case _:
                raise ValueError(f"Not a trader entry: {entry!r}")
    return "".join(parts)


def format_token(token: Token, options: FormatOptions | None = None) -> str:
    """Render one top-level token."""
    resolved = options or FormatOptions()
    match token:
        case Comment():
            return format_comment(token)
        case CurrencyName():
            return format_currency_name(token, resolved)
        case Trader():
            return format_trader(token, resolved)
        case OpenFile(line=line):
            return f"<OpenFile> {format_line(line)}"
        case FileEnd(line=line):
            return f"<FileEnd> {format_line(line)}"
        case _:
            raise ValueError(f"Not a top-level token: {token!r}")


def iter_formatted(tokens: Iterable[Token], options: FormatOptions | None = None) -> Iterable[str]:
    """Yield one line-group per token: its rendering plus a terminating newline."""
    for token in tokens:
        yield f"{format_token(token, options)}\n"


def format_tokens(tokens: Iterable[Token], options: FormatOptions | None = None) -> str:
    return "".join(iter_formatted(tokens, options))
