"""Shared parse carrier and lazy pipeline entrypoint exports."""

from __future__ import annotations

from traderfmt.format.options import FormatOptions
from traderfmt.pipeline.result import TraderParseResult
from traderfmt.pipeline.results import FormatRunResult


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    parse: TraderParseResult | None = None,
) -> FormatRunResult:
    from traderfmt.format.runner import run_format as _run_format

    return _run_format(text, options=options, parse=parse)


__all__ = [
    "FormatRunResult",
    "TraderParseResult",
    "run_format",
]
