"""Single-token field validators.

Each validator takes one raw token and either returns the validated value or raises
`InstructionError` with the field's error code. They never look at neighbouring tokens.
"""

from __future__ import annotations

import re

from src.instruction import errors
from src.instruction.errors import InstructionError
from src.instruction.keywords import ACCOUNT_ID_CHARS, SUPPORTED_CURRENCIES

_AMOUNT_RE = re.compile(r"[+-]?[0-9]+")


def parse_amount(token: str | None) -> int:
    """Parse a positive integer amount in the currency's smallest unit.

    Decimal amounts (`"10.5"`) are rejected, as are zero, negative and empty values, and tokens
    longer than `sys.get_int_max_str_digits()` digits.

    Raises:
        InstructionError: `AM01`.
    """

    if not token or "." in token or not _AMOUNT_RE.fullmatch(token):
        raise InstructionError(errors.INVALID_AMOUNT)

    try:
        amount = int(token)
    except ValueError as exc:
        # Only reachable past the interpreter's int-from-string digit cap (4300 by default).
        raise InstructionError(errors.INVALID_AMOUNT) from exc
    if amount <= 0:
        raise InstructionError(errors.INVALID_AMOUNT)
    return amount


def parse_currency(token: str | None) -> str:
    """Return the uppercase currency code if it is supported.

    Raises:
        InstructionError: `CU02`.
    """

    if not token or token.upper() not in SUPPORTED_CURRENCIES:
        raise InstructionError(errors.UNSUPPORTED_CURRENCY)
    return token.upper()


def _date_part(value: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise InstructionError(errors.INVALID_DATE_FORMAT)
    return int(value)


def parse_date(token: str | None) -> str:
    """Validate a `YYYY-MM-DD` execution date and return it unchanged.

    The check is deliberately lenient about calendars: any day from 1 to 31 is accepted for every
    month, so `2024-02-30` passes. The settlement evaluator rolls such dates over into the next
    month when it builds the execution instant.

    Raises:
        InstructionError: `DT01`.
    """

    if not token or len(token) != 10 or token[4] != "-" or token[7] != "-":
        raise InstructionError(errors.INVALID_DATE_FORMAT)

    year = _date_part(token[0:4])
    month = _date_part(token[5:7])
    day = _date_part(token[8:10])

    if not 1 <= month <= 12 or not 1 <= day <= 31:
        raise InstructionError(errors.INVALID_DATE_FORMAT)
    return token


def parse_account_id(token: str | None) -> str:
    """Validate an account id (letters, digits, `@`, `.` and `-` only).

    Raises:
        InstructionError: `AC04`.
    """

    if not token or any(ch not in ACCOUNT_ID_CHARS for ch in token):
        raise InstructionError(errors.INVALID_ACCOUNT_ID)
    return token
