"""Token tree for trader config documents."""

from traderfmt.ast.dump import dump_tokens
from traderfmt.ast.model import (
    CategoryItem,
    CategoryItemToken,
    Comment,
    CSVLine,
    Currency,
    CurrencyName,
    CurrencyToken,
    FileEnd,
    Line,
    OpenFile,
    Token,
    Trader,
    TraderCategory,
    TraderCategoryToken,
)
__all__ = [
    "CSVLine",
    "CategoryItem",
    "CategoryItemToken",
    "Comment",
    "Currency",
    "CurrencyName",
    "CurrencyToken",
    "FileEnd",
    "Line",
    "OpenFile",
    "Token",
    "Trader",
    "TraderCategory",
    "TraderCategoryToken",
    "dump_tokens",
]
