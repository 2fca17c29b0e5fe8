"""Format runner over a shared trader parse result."""

from __future__ import annotations

from traderfmt.format.options import FormatOptions
from traderfmt.format.render import format_tokens
from traderfmt.logging_setup import get_logger
from traderfmt.parser import parse_result
from traderfmt.pipeline.result import TraderParseResult
from traderfmt.pipeline.results import FormatRunResult

logger = get_logger(__name__)


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    parse: TraderParseResult | None = None,
) -> FormatRunResult:
    """Run formatting from a single parse lifecycle.

    Pass `parse` to reuse an existing parse result; `text` is then ignored.
    """
    resolved_parse = parse if parse is not None else parse_result(text)
    resolved_options = options or FormatOptions()

    formatted_text = format_tokens(resolved_parse.tokens, resolved_options)
    changed = formatted_text != resolved_parse.source_text
    logger.debug(
        "Formatted %d token(s) with %s indentation (changed=%s)",
        len(resolved_parse.tokens),
        resolved_options.indent_style,
        changed,
    )

    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted_text,
        options=resolved_options,
        changed=changed,
    )
