"""Centralized trader config source cases used across parser/format tests."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass

COLUMN = 60


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


def currency_row(*values: str, comment: str | None = None) -> str:
    """Canonical currency row (without the `<Currency>` prefix)."""
    last = len(values) - 1
    text = "".join((v if i == last else f"{v},").ljust(COLUMN) for i, v in enumerate(values))
    if comment is not None:
        text += f" // {comment}"
    return f"{text}\n"


@dataclass(frozen=True, slots=True)
class TraderCase:
    name: str
    source: str
    token_count: int


# Already canonical (default space indentation); formatting must reproduce them exactly.
CANONICAL_CASES: tuple[TraderCase, ...] = (
    TraderCase(name="single_comment", source="// Trader config\n", token_count=1),
    TraderCase(
        name="currency_table",
        source=(
            "<CurrencyName> #TraderObject_Currencies \n"
            f"    <Currency> {currency_row('MoneyRuble100', '100')}"
            "    // coins\n"
            f"    <Currency> {currency_row('MoneyRuble1', '1', comment='smallest')}"
            "\n"
        ),
        token_count=1,
    ),
    TraderCase(
        name="trader_with_categories",
        source=(
            "<Trader> Bob \n"
            "    // stock list\n"
            "    <Category> Weapons // guns\n"
            "        AK47,10,100,50\n"
            "        // rare\n"
            "        M4A1,1,200,100 // expensive\n"
            "    <Category> Food \n"
            "        Apple,*,5,1\n"
            "\n"
        ),
        token_count=1,
    ),
    TraderCase(
        name="file_markers",
        source="<OpenFile> TraderConfig/Weapons.txt \n\n<FileEnd>  \n\n",
        token_count=2,
    ),
    TraderCase(
        name="full_document",
        source=(
            "// header\n"
            "<CurrencyName> Rubles \n"
            f"    <Currency> {currency_row('MoneyRuble5', '5')}"
            "\n"
            "<Trader> Alice // north\n"
            "    <Category> Tools \n"
            "        Pliers,1,10,5\n"
            "\n"
            "<FileEnd>  \n"
            "\n"
        ),
        token_count=4,
    ),
)

# Hand-written inputs with irregular spacing.
MESSY_TRADER = _dedent(
    """
    <Trader>    Bob   //   best trader
      <Category>Weapons
    AK47 , 10,100 ,  50
            // rare stuff
    \t<Category> Food
    Apple,*,5,1//cheap
    """
)

MESSY_TRADER_FORMATTED = (
    "<Trader> Bob // best trader\n"
    "    <Category> Weapons \n"
    "        AK47,10,100,50\n"
    "        // rare stuff\n"
    "    <Category> Food \n"
    "        Apple,*,5,1 // cheap\n"
    "\n"
)


def case_id(case: TraderCase) -> str:
    return case.name
