"""Token tree data model.

Nodes are frozen and own copies of their text. Child sequences are tuples in
source order, which is also the render order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

CATEGORY_ITEM_FIELD_COUNT = 4


@dataclass(frozen=True, slots=True)
class Comment:
    """`//` comment; `message` excludes the slashes and leading whitespace."""

    message: str


@dataclass(frozen=True, slots=True)
class Line:
    """Free text after a tag on its header line."""

    text: str
    comment: Comment | None = None


@dataclass(frozen=True, slots=True)
class CSVLine:
    values: tuple[str, ...]
    comment: Comment | None = None

    @property
    def is_empty(self) -> bool:
        return not self.values and self.comment is None


@dataclass(frozen=True, slots=True)
class Currency:
    """`<Currency>` row inside a currency table."""

    row: CSVLine


@dataclass(frozen=True, slots=True)
class CategoryItem:
    """One tradeable entry: `class,amount,buy_value,sell_value`."""

    class_name: str
    amount: str
    buy_value: str
    sell_value: str
    comment: Comment | None = None

    @staticmethod
    def from_csv_line(line: CSVLine) -> CategoryItem:
        if len(line.values) != CATEGORY_ITEM_FIELD_COUNT:
            raise ValueError(
                f"Expected {CATEGORY_ITEM_FIELD_COUNT} fields, got {len(line.values)}"
            )
        class_name, amount, buy_value, sell_value = line.values
        return CategoryItem(
            class_name=class_name,
            amount=amount,
            buy_value=buy_value,
            sell_value=sell_value,
            comment=line.comment,
        )

    @property
    def values(self) -> tuple[str, str, str, str]:
        return (self.class_name, self.amount, self.buy_value, self.sell_value)


CurrencyToken: TypeAlias = Comment | Currency


@dataclass(frozen=True, slots=True)
class CurrencyName:
    name: Line
    currencies: tuple[CurrencyToken, ...] = ()


CategoryItemToken: TypeAlias = Comment | CategoryItem


@dataclass(frozen=True, slots=True)
class TraderCategory:
    name: Line
    items: tuple[CategoryItemToken, ...] = ()


TraderCategoryToken: TypeAlias = Comment | TraderCategory


@dataclass(frozen=True, slots=True)
class Trader:
    name: Line
    categories: tuple[TraderCategoryToken, ...] = ()


@dataclass(frozen=True, slots=True)
class OpenFile:
    line: Line


@dataclass(frozen=True, slots=True)
class FileEnd:
    line: Line


Token: TypeAlias = Comment | CurrencyName | Trader | OpenFile | FileEnd
