"""Parse carrier for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass

from traderfmt.ast import Token


@dataclass(frozen=True, slots=True)
class TraderParseResult:
    """Trader config parse result."""

    source_text: str
    tokens: tuple[Token, ...]
    skipped_chars: int = 0

    @property
    def had_skipped_content(self) -> bool:
        return self.skipped_chars > 0
