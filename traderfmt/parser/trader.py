"""High-level parse entrypoint for trader config text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from traderfmt.ast import Token
from traderfmt.logging_setup import get_logger
from traderfmt.parser.cursor import Cursor
from traderfmt.parser.grammar import DocumentParse, parse_document

if TYPE_CHECKING:
    from traderfmt.pipeline import TraderParseResult

logger = get_logger(__name__)

BOM = "\ufeff"


def _parse(text: str) -> DocumentParse:
    parsed = parse_document(Cursor(text))
    logger.debug(
        "Parsed %d top-level token(s), skipped %d character(s)",
        len(parsed.tokens),
        parsed.skipped_chars,
    )
    return parsed


def parse(text: str) -> tuple[Token, ...]:
    """Parse a whole document into its top-level tokens.

    Raises `ParseError` for unclosed tags and malformed category rows.
    """
    return _parse(text.removeprefix(BOM)).tokens


def parse_result(text: str) -> TraderParseResult:
    from traderfmt.pipeline import TraderParseResult

    source_text = text.removeprefix(BOM)
    parsed = _parse(source_text)
    return TraderParseResult(
        source_text=source_text,
        tokens=parsed.tokens,
        skipped_chars=parsed.skipped_chars,
    )
