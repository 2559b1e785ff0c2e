"""Keyword grammar parser for payment instructions.

Two sentence forms are recognized:

    DEBIT  <amount> <currency> FROM ACCOUNT <debit>  FOR CREDIT TO ACCOUNT <credit> [ON <date>]
    CREDIT <amount> <currency> TO ACCOUNT <credit>   FOR DEBIT FROM ACCOUNT <debit> [ON <date>]

The parser walks the token list left to right and validates each token as soon as it is reached,
so the first offending token decides the error code.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from src.instruction import errors
from src.instruction.errors import InstructionError
from src.instruction.keywords import (
    GRAMMARS,
    MIN_GRAMMAR_TOKENS,
    MIN_TOKENS,
    ON_KEYWORD,
    Grammar,
    detect_instruction_type,
)
from src.instruction.schema import InstructionType, ParsedInstruction
from src.instruction.tokenize import tokenize
from src.instruction.validators import (
    parse_account_id,
    parse_amount,
    parse_currency,
    parse_date,
)

T = TypeVar("T")


class _TokenCursor:
    """Sequential reader over the token list."""

    def __init__(self, tokens: list[str]) -> None:
        self._tokens = tokens
        self._pos = 0

    def has_more(self) -> bool:
        return self._pos < len(self._tokens)

    def peek_keyword(self, keyword: str) -> bool:
        return self.has_more() and self._tokens[self._pos].upper() == keyword

    def take(self, field: Callable[[str], T]) -> T:
        token = self._tokens[self._pos]
        self._pos += 1
        return field(token)

    def expect_keywords(self, keywords: tuple[str, ...]) -> None:
        for keyword in keywords:
            if not self.peek_keyword(keyword):
                raise InstructionError(errors.INVALID_KEYWORD_ORDER)
            self._pos += 1


def _parse_execute_by(cursor: _TokenCursor) -> str | None:
    if not cursor.peek_keyword(ON_KEYWORD):
        return None
    cursor.expect_keywords((ON_KEYWORD,))
    if not cursor.has_more():
        # A trailing "ON" with nothing after it counts as no date clause.
        return None
    return cursor.take(parse_date)


def _parse_body(
        cursor: _TokenCursor, instruction_type: InstructionType, grammar: Grammar
) -> ParsedInstruction:
    amount = cursor.take(parse_amount)
    currency = cursor.take(parse_currency)

    cursor.expect_keywords(grammar.first_keywords)
    first_account = cursor.take(parse_account_id)

    cursor.expect_keywords(grammar.second_keywords)
    second_account = cursor.take(parse_account_id)

    if grammar.first_account_is_debit:
        debit_account, credit_account = first_account, second_account
    else:
        debit_account, credit_account = second_account, first_account

    return ParsedInstruction(
        type=instruction_type,
        amount=amount,
        currency=currency,
        debit_account=debit_account,
        credit_account=credit_account,
        execute_by=_parse_execute_by(cursor),
    )


def parse_instruction(text: str | None) -> ParsedInstruction:
    """Parse an instruction sentence into a `ParsedInstruction`.

    Raises:
        InstructionError: With a syntax code (`SY01`, `SY02`) or a field code
            (`AM01`, `CU02`, `AC04`, `DT01`).
    """

    tokens = tokenize(text)
    if len(tokens) < MIN_TOKENS:
        raise InstructionError(errors.MISSING_KEYWORD)

    instruction_type = detect_instruction_type(tokens[0])
    if instruction_type is None:
        raise InstructionError(errors.MISSING_KEYWORD)

    if len(tokens) < MIN_GRAMMAR_TOKENS:
        raise InstructionError(errors.MISSING_KEYWORD)

    cursor = _TokenCursor(tokens)
    cursor.expect_keywords((instruction_type.value,))
    return _parse_body(cursor, instruction_type, GRAMMARS[instruction_type])
