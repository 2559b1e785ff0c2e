"""Keyword literals, supported currencies and the two sentence grammars.

These tables are read-only and shared by the tokenizer, the validators and the grammar parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from src.instruction.schema import InstructionType

SUPPORTED_CURRENCIES: Final[frozenset[str]] = frozenset({"NGN", "USD", "GBP", "GHS"})

ACCOUNT_ID_CHARS: Final[frozenset[str]] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789@.-"
)

ON_KEYWORD: Final[str] = "ON"

# Shortest token count for either sentence form, and the length of a full sentence without the
# optional `ON <date>` clause.
MIN_TOKENS: Final[int] = 8
MIN_GRAMMAR_TOKENS: Final[int] = 11


@dataclass(frozen=True)
class Grammar:
    """Keyword layout of one sentence form.

    `first_keywords` sit between the currency and the first account id, `second_keywords` between
    the two account ids. `first_account_is_debit` says which side the first id belongs to.
    """

    first_keywords: tuple[str, ...]
    second_keywords: tuple[str, ...]
    first_account_is_debit: bool


GRAMMARS: Final[dict[InstructionType, Grammar]] = {
    InstructionType.DEBIT: Grammar(
        first_keywords=("FROM", "ACCOUNT"),
        second_keywords=("FOR", "CREDIT", "TO", "ACCOUNT"),
        first_account_is_debit=True,
    ),
    InstructionType.CREDIT: Grammar(
        first_keywords=("TO", "ACCOUNT"),
        second_keywords=("FOR", "DEBIT", "FROM", "ACCOUNT"),
        first_account_is_debit=False,
    ),
}


def detect_instruction_type(token: str) -> InstructionType | None:
    """Map the leading token to an instruction type (case-insensitive)."""

    try:
        return InstructionType(token.upper())
    except ValueError:
        return None
