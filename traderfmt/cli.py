"""Command-line entrypoint: format a trader config file to stdout."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from traderfmt.ast import dump_tokens
from traderfmt.errors import ParseError, TraderFmtError
from traderfmt.files import load_source
from traderfmt.format import FormatOptions, IndentStyle
from traderfmt.logging_setup import configure_logging, get_logger
from traderfmt.parser import parse_result
from traderfmt.pipeline import run_format

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="traderfmt",
        description="A tool to format DayZ trader config files.",
    )
    parser.add_argument("file", type=Path, help="Trader config file to format.")
    parser.add_argument(
        "--indent-style",
        choices=[style.value for style in IndentStyle],
        default=IndentStyle.SPACES.value,
        help="Indentation of comments nested in blocks (default: spaces).",
    )
    parser.add_argument(
        "--dump-tokens",
        action="store_true",
        help="Print the parsed token tree instead of the formatted text.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for diagnostics on stderr (default: $TRADERFMT_LOG_LEVEL or WARNING).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    source: str | None = None
    try:
        source = load_source(args.file)
        parsed = parse_result(source)
        if parsed.had_skipped_content:
            logger.info("Skipped %d unrecognised character(s) in %s", parsed.skipped_chars, args.file)

        if args.dump_tokens:
            output = "".join(f"{line}\n" for line in dump_tokens(parsed.tokens))
        else:
            options = FormatOptions.for_style(args.indent_style)
            output = run_format(source, options, parse=parsed).formatted_text
    except TraderFmtError as exc:
        # Parse errors carry a range into the source; path/read errors do not.
        context = source if isinstance(exc, ParseError) else None
        print(exc.diagnostic.render(context, path=str(args.file)), file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0
