"""Debug dump of a parsed token tree."""

from __future__ import annotations

from collections.abc import Iterable

from traderfmt.ast.model import (
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


def _line(line: Line) -> str:
    text = f"text={line.text!r}"
    if line.comment is not None:
        text += f" comment={line.comment.message!r}"
    return text


def _row(row: CSVLine) -> str:
    text = f"values={list(row.values)!r}"
    if row.comment is not None:
        text += f" comment={row.comment.message!r}"
    return text


def dump_tokens(tokens: Iterable[Token]) -> list[str]:
    """One indented line per node, in source order."""
    lines: list[str] = []

    def walk(node: object, depth: int) -> None:
        indent = "  " * depth
        match node:
            case Comment(message=message):
                lines.append(f"{indent}Comment message={message!r}")
            case CurrencyName(name=name, currencies=children):
                lines.append(f"{indent}CurrencyName {_line(name)}")
                for child in children:
                    walk(child, depth + 1)
            case Currency(row=row):
                lines.append(f"{indent}Currency {_row(row)}")
            case Trader(name=name, categories=children):
                lines.append(f"{indent}Trader {_line(name)}")
                for child in children:
                    walk(child, depth + 1)
            case TraderCategory(name=name, items=children):
                lines.append(f"{indent}Category {_line(name)}")
                for child in children:
                    walk(child, depth + 1)
            case CategoryItem():
                text = f"{indent}Item values={list(node.values)!r}"
                if node.comment is not None:
                    text += f" comment={node.comment.message!r}"
                lines.append(text)
            case OpenFile(line=line):
                lines.append(f"{indent}OpenFile {_line(line)}")
            case FileEnd(line=line):
                lines.append(f"{indent}FileEnd {_line(line)}")
            case _:
                raise ValueError(f"Unknown node: {node!r}")

    for token in tokens:
        walk(token, 0)
    return lines
