#!/usr/bin/env python
from __future__ import annotations

import argparse
from pathlib import Path

from traderfmt.ast import dump_tokens
from traderfmt.files import load_source
from traderfmt.parser import parse_result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump the parsed token tree of a trader config file.")
    parser.add_argument("input", type=Path, help="Trader config file to parse.")
    parser.add_argument(
        "--out",
        type=Path,
        default=Path("out/tokens.txt"),
        help="Output file (defaults to ./out/tokens.txt).",
    )
    args = parser.parse_args(argv)

    parsed = parse_result(load_source(args.input))
    lines = dump_tokens(parsed.tokens)

    args.out.parent.mkdir(parents=True, exist_ok=True)
    with args.out.open("w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")

    print(f"Wrote {len(lines)} node(s) to {args.out} ({parsed.skipped_chars} character(s) skipped)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
