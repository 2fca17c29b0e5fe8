"""Character cursor with cheap checkpoints for ordered-choice parsing."""

from __future__ import annotations

from dataclasses import dataclass

from traderfmt.diagnostics import PARSER_CURSOR_ADVANCE, Diagnostic
from traderfmt.errors import CursorAdvanceError
from traderfmt.text import TextRange, TextSize

EOF_CHAR = "\0"
BLANKS = frozenset({" ", "\t"})
WHITESPACE = frozenset({" ", "\t", "\r", "\n"})
NEWLINES = frozenset({"\r", "\n"})


@dataclass(frozen=True, slots=True)
class CursorCheckpoint:
    """Cursor checkpoint."""

    position: int


class Cursor:
    """Forward-only position over the source text.

    Sub-parsers probe on a `fork()` and `commit()` it back only when they match,
    so a failed alternative leaves this cursor untouched.
    """

    def __init__(self, source: str, position: int = 0) -> None:
        self._source = source
        self._position = position

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def current(self) -> str:
        if self.is_eof:
            return EOF_CHAR
        return self._source[self._position]

    def peek(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return EOF_CHAR
        return self._source[index]

    @property
    def checkpoint(self) -> CursorCheckpoint:
        return CursorCheckpoint(position=self._position)

    def rewind(self, checkpoint: CursorCheckpoint) -> None:
        self._position = checkpoint.position

    def fork(self) -> Cursor:
        return Cursor(self._source, self._position)

    def commit(self, fork: Cursor) -> None:
        if fork._source is not self._source:
            raise ValueError("Cannot commit a cursor over a different source")
        if fork._position < self._position:
            raise ValueError("Cannot commit a cursor that moved backwards")
        self._position = fork._position

    def advance(self, steps: int = 1) -> None:
        target = self._position + steps
        if target > len(self._source):
            raise CursorAdvanceError(
                Diagnostic.from_spec(
                    PARSER_CURSOR_ADVANCE,
                    range=TextRange.empty(TextSize.from_int(len(self._source))),
                    detail=f"Tried to move {steps} character(s) past offset {self._position}.",
                )
            )
        self._position = target

    def bump(self) -> str:
        ch = self.current
        self.advance(1)
        return ch

    def skip_while(self, chars: frozenset[str]) -> None:
        while not self.is_eof and self._source[self._position] in chars:
            self._position += 1

    def skip_whitespace(self) -> None:
        self.skip_while(WHITESPACE)

    def skip_blanks(self) -> None:
        self.skip_while(BLANKS)

    def eat_newline(self) -> bool:
        """Consume one `\\n`, `\\r\\n` or `\\r`."""
        if self.current == "\n":
            self._position += 1
            return True
        if self.current == "\r":
            self._position += 2 if self.peek() == "\n" else 1
            return True
        return False

    def at_comment(self) -> bool:
        return self.current == "/" and self.peek() == "/"

    def range_from(self, start: int) -> TextRange:
        return TextRange.new(TextSize.from_int(start), TextSize.from_int(self._position))
