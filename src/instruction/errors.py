"""Error catalogue for instruction processing.

Every domain failure is an `AppError` (a stable short code plus a human message). Parsers,
validators and the settlement evaluator raise `InstructionError` carrying one of these values; the
processing service converts it into a failed outcome record.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppError:
    """A machine code and the human-readable reason returned to the caller."""

    code: str
    message: str


class InstructionError(ValueError):
    """Raised when an instruction cannot be parsed, validated or settled."""

    def __init__(self, error: AppError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message


# Syntax
MISSING_KEYWORD = AppError("SY01", "Missing required keyword in instruction")
INVALID_KEYWORD_ORDER = AppError("SY02", "Instruction keywords are not in the required order")
MALFORMED_INSTRUCTION = AppError("SY03", "Malformed instruction: unable to parse keywords")

# Fields
INVALID_AMOUNT = AppError("AM01", "Amount must be a positive integer")
UNSUPPORTED_CURRENCY = AppError("CU02", "Currency is not supported")
INVALID_DATE_FORMAT = AppError("DT01", "Invalid date format, expected YYYY-MM-DD")
INVALID_ACCOUNT_ID = AppError("AC04", "Account id contains invalid characters")

# Business rules
INSUFFICIENT_FUNDS = AppError("AC01", "Insufficient funds in debit account")
SAME_ACCOUNT_ERROR = AppError("AC02", "Debit and credit accounts cannot be the same")
ACCOUNT_NOT_FOUND = AppError("AC03", "Account not found")
CURRENCY_MISMATCH = AppError("CU01", "Account currency does not match instruction currency")

# Outcomes
TRANSACTION_SUCCESSFUL = AppError("AP00", "Transaction executed successfully")
TRANSACTION_PENDING = AppError("AP02", "Transaction scheduled for future execution")

ERRORS_BY_CODE: dict[str, AppError] = {
    err.code: err
    for err in (
        MISSING_KEYWORD,
        INVALID_KEYWORD_ORDER,
        MALFORMED_INSTRUCTION,
        INVALID_AMOUNT,
        UNSUPPORTED_CURRENCY,
        INVALID_DATE_FORMAT,
        INVALID_ACCOUNT_ID,
        INSUFFICIENT_FUNDS,
        SAME_ACCOUNT_ERROR,
        ACCOUNT_NOT_FOUND,
        CURRENCY_MISMATCH,
        TRANSACTION_SUCCESSFUL,
        TRANSACTION_PENDING,
    )
}


def error_from_exception(exc: BaseException) -> AppError:
    """Map an arbitrary exception to an `AppError`.

    Only `InstructionError` carrying a known code/message pair is passed through; everything else
    collapses to `MALFORMED_INSTRUCTION`.
    """

    if isinstance(exc, InstructionError) and exc.code and exc.message:
        return exc.error
    return MALFORMED_INSTRUCTION
