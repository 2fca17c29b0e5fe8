"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from traderfmt.format.options import FormatOptions
from traderfmt.pipeline.result import TraderParseResult


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting from a shared parse result."""

    parse: TraderParseResult
    formatted_text: str
    options: FormatOptions
    changed: bool
