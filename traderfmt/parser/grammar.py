"""Trader config grammar routines.

Every `parse_*` probe either consumes its construct and returns a node, or
returns `None` with the caller's cursor untouched. Constructs that are
positively recognised but cannot be finished raise a `ParseError`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from traderfmt.ast import (
    CategoryItem,
    CategoryItemToken,
    Comment,
    CSVLine,
    Currency,
    CurrencyName,
    CurrencyToken,
    FileEnd,
    Line,
    OpenFile,
    Token,
    Trader,
    TraderCategory,
    TraderCategoryToken,
)
from traderfmt.diagnostics import (
    PARSER_MALFORMED_CATEGORY_ROW,
    PARSER_UNCLOSED_TAG,
    Diagnostic,
)
from traderfmt.errors import MalformedRowError, UnclosedTagError
from traderfmt.logging_setup import get_logger
from traderfmt.parser.cursor import NEWLINES, Cursor
from traderfmt.text import TextRange, TextSize, line_column, slice_text_range

logger = get_logger(__name__)

T = TypeVar("T")

CURRENCY_NAME_TAG = "CurrencyName"
CURRENCY_TAG = "Currency"
TRADER_TAG = "Trader"
CATEGORY_TAG = "Category"
OPEN_FILE_TAG = "OpenFile"
FILE_END_TAG = "FileEnd"


@dataclass(frozen=True, slots=True)
class DocumentParse:
    tokens: tuple[Token, ...]
    skipped_chars: int


@dataclass(slots=True)
class ListProgress:
    """Detect stalls inside element-list loops."""

    _position: int | None = None

    def assert_progressing(self, cursor: Cursor) -> None:
        if self._position is not None and cursor.position <= self._position:
            raise RuntimeError(f"Parser stopped making progress at offset {cursor.position}")
        self._position = cursor.position


def parse_comment(cursor: Cursor) -> Comment | None:
    probe = cursor.fork()
    probe.skip_whitespace()
    if not probe.at_comment():
        return None

    probe.advance(2)
    probe.skip_blanks()
    start = probe.position
    while not probe.is_eof and probe.current not in NEWLINES:
        probe.advance(1)

    cursor.commit(probe)
    return Comment(probe.source[start : probe.position])


def parse_line(cursor: Cursor) -> Line:
    """Rest of a header line: free text plus an optional trailing comment."""
    cursor.skip_blanks()
    start = cursor.position
    end = start
    comment: Comment | None = None

    while not cursor.is_eof:
        if cursor.current in NEWLINES:
            break
        if cursor.at_comment():
            end = cursor.position
            comment = parse_comment(cursor)
            break
        cursor.advance(1)
        end = cursor.position

    cursor.eat_newline()
    return Line(text=cursor.source[start:end].strip(), comment=comment)


def parse_csv_line(cursor: Cursor, *, cross_lines: bool = True) -> CSVLine | None:
    """Comma-separated row.

    Returns `None` for a row that is empty or that turns out to be the start of
    the next tag (`<`), without consuming anything.
    """
    probe = cursor.fork()
    if cross_lines:
        probe.skip_whitespace()
    else:
        probe.skip_blanks()

    source = probe.source
    values: list[str] = []
    comment: Comment | None = None
    field_start = probe.position

    def push_field(end: int) -> None:
        value = source[field_start:end].strip()
        if value:
            values.append(value)

    while not probe.is_eof:
        ch = probe.current
        if ch == "<":
            return None
        if ch in NEWLINES:
            break
        if probe.at_comment():
            push_field(probe.position)
            comment = parse_comment(probe)
            break
        if ch == ",":
            push_field(probe.position)
            probe.advance(1)
            field_start = probe.position
            continue
        probe.advance(1)

    if comment is None:
        push_field(probe.position)
    probe.eat_newline()

    line = CSVLine(values=tuple(values), comment=comment)
    if line.is_empty:
        return None
    cursor.commit(probe)
    return line


def parse_tag(cursor: Cursor, keyword: str) -> bool:
    """Consume `<keyword>` (or `<keyword/`, `<keyword/>`).

    A different tag name is a no-match; a tag whose line ends before it is
    closed is an error whatever its name.
    """
    probe = cursor.fork()
    probe.skip_whitespace()
    if probe.current != "<":
        return False

    tag_start = probe.position
    probe.advance(1)
    name_start = probe.position
    terminator: str | None = None
    while not probe.is_eof:
        ch = probe.current
        if ch == ">" or ch == "/":
            terminator = ch
            break
        if ch in NEWLINES:
            raise UnclosedTagError(
                Diagnostic.from_spec(
                    PARSER_UNCLOSED_TAG,
                    range=probe.range_from(tag_start),
                    detail=f"Found `{slice_text_range(probe.source, probe.range_from(tag_start))}`.",
                )
            )
        probe.advance(1)

    if probe.source[name_start : probe.position] != keyword:
        return False

    # Consume the terminator; at end-of-input this raises CursorAdvanceError.
    probe.advance(1)
    if terminator == "/" and probe.current == ">":
        probe.advance(1)
    cursor.commit(probe)
    return True


def parse_list(cursor: Cursor, parse_element: Callable[[Cursor], T | None]) -> tuple[T, ...]:
    """Collect elements until `parse_element` stops matching."""
    elements: list[T] = []
    progress = ListProgress()
    while (element := parse_element(cursor)) is not None:
        progress.assert_progressing(cursor)
        elements.append(element)
    return tuple(elements)


def parse_currency(cursor: Cursor) -> Currency | None:
    probe = cursor.fork()
    if not parse_tag(probe, CURRENCY_TAG):
        return None
    row = parse_csv_line(probe, cross_lines=False)
    cursor.commit(probe)
    return Currency(row=row if row is not None else CSVLine(values=()))


def parse_currency_token(cursor: Cursor) -> CurrencyToken | None:
    if (comment := parse_comment(cursor)) is not None:
        return comment
    return parse_currency(cursor)


def parse_currency_name(cursor: Cursor) -> CurrencyName | None:
    probe = cursor.fork()
    if not parse_tag(probe, CURRENCY_NAME_TAG):
        return None
    name = parse_line(probe)
    currencies = parse_list(probe, parse_currency_token)
    cursor.commit(probe)
    return CurrencyName(name=name, currencies=currencies)


def parse_category_item(cursor: Cursor) -> CategoryItem | None:
    probe = cursor.fork()
    probe.skip_whitespace()
    row_start = probe.position
    row = parse_csv_line(probe)
    if row is None:
        return None

    try:
        item = CategoryItem.from_csv_line(row)
    except ValueError as exc:
        raw_row = _raw_line(probe.source, row_start)
        raise MalformedRowError(
            Diagnostic.from_spec(
                PARSER_MALFORMED_CATEGORY_ROW,
                range=TextRange.new(
                    TextSize.from_int(row_start),
                    TextSize.from_int(row_start + len(raw_row)),
                ),
                detail=f"Got {len(row.values)} field(s) in `{raw_row}`.",
            ),
            raw_row=raw_row,
            field_count=len(row.values),
        ) from exc

    cursor.commit(probe)
    return item


def parse_category_item_token(cursor: Cursor) -> CategoryItemToken | None:
    if (comment := parse_comment(cursor)) is not None:
        return comment
    return parse_category_item(cursor)


def parse_category(cursor: Cursor) -> TraderCategory | None:
    probe = cursor.fork()
    if not parse_tag(probe, CATEGORY_TAG):
        return None
    name = parse_line(probe)
    items = parse_list(probe, parse_category_item_token)
    cursor.commit(probe)
    return TraderCategory(name=name, items=items)


def parse_trader_category_token(cursor: Cursor) -> TraderCategoryToken | None:
    if (comment := parse_comment(cursor)) is not None:
        return comment
    return parse_category(cursor)


def parse_trader(cursor: Cursor) -> Trader | None:
    probe = cursor.fork()
    if not parse_tag(probe, TRADER_TAG):
        return None
    name = parse_line(probe)
    categories = parse_list(probe, parse_trader_category_token)
    cursor.commit(probe)
    return Trader(name=name, categories=categories)


def parse_open_file(cursor: Cursor) -> OpenFile | None:
    probe = cursor.fork()
    if not parse_tag(probe, OPEN_FILE_TAG):
        return None
    line = parse_line(probe)
    cursor.commit(probe)
    return OpenFile(line=line)


def parse_file_end(cursor: Cursor) -> FileEnd | None:
    probe = cursor.fork()
    if not parse_tag(probe, FILE_END_TAG):
        return None
    line = parse_line(probe)
    cursor.commit(probe)
    return FileEnd(line=line)


TOP_LEVEL_PARSERS: tuple[Callable[[Cursor], Token | None], ...] = (
    parse_comment,
    parse_currency_name,
    parse_trader,
    parse_open_file,
    parse_file_end,
)


def parse_token(cursor: Cursor) -> Token | None:
    for parse_alternative in TOP_LEVEL_PARSERS:
        token = parse_alternative(cursor)
        if token is not None:
            return token
    return None


def parse_document(cursor: Cursor) -> DocumentParse:
    """Top-level loop; unrecognised characters are skipped one at a time."""
    tokens: list[Token] = []
    skipped = 0
    skip_run_start: int | None = None

    while True:
        cursor.skip_whitespace()
        if cursor.is_eof:
            break
        token_start = cursor.position
        token = parse_token(cursor)
        if token is None:
            if skip_run_start is None:
                skip_run_start = cursor.position
            cursor.advance(1)
            skipped += 1
            continue
        if skip_run_start is not None:
            _log_skipped_run(cursor.source, skip_run_start, token_start)
            skip_run_start = None
        tokens.append(token)

    if skip_run_start is not None:
        _log_skipped_run(cursor.source, skip_run_start, cursor.position)
    return DocumentParse(tokens=tuple(tokens), skipped_chars=skipped)


def _raw_line(source: str, start: int) -> str:
    end = start
    while end < len(source) and source[end] not in NEWLINES:
        end += 1
    return source[start:end]


def _log_skipped_run(source: str, start: int, end: int) -> None:
    line, column = line_column(source, TextSize.from_int(start))
    logger.debug(
        "Skipped unrecognised content at %d:%d: %r",
        line,
        column,
        source[start:end].strip(),
    )
