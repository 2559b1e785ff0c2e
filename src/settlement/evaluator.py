"""Settlement decision for a parsed instruction against an account snapshot.

The evaluator checks business rules in a fixed order (existence, distinctness, currency, funds)
and then decides between immediate settlement and a pending, future-dated transfer. It never
mutates the input accounts; the returned projection is built from fresh objects.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

from src.instruction import errors
from src.instruction.errors import InstructionError
from src.instruction.schema import (
    Account,
    AccountSnapshotEntry,
    OutcomeRecord,
    ParsedInstruction,
    TransferStatus,
)


def _find_account(accounts: Sequence[Account], account_id: str) -> Account:
    for account in accounts:
        if account.id == account_id:
            return account
    raise InstructionError(errors.ACCOUNT_NOT_FOUND)


def execution_instant(execute_by: str) -> datetime:
    """Return midnight UTC of a validated `YYYY-MM-DD` date.

    Days past the end of the month roll over (`2024-02-30` -> `2024-03-01 00:00 UTC`), matching
    the lenient date validator.
    """

    year, month, day = (int(part) for part in execute_by.split("-"))
    first_of_month = datetime(year, month, 1, tzinfo=UTC)
    return first_of_month + timedelta(days=day - 1)


def is_future_dated(execute_by: str | None, now: datetime) -> bool:
    """Whether the execution date lies strictly after `now`.

    Year 0000 passes the date validator but has no `datetime`; it is always in the past.
    """

    if execute_by is None or execute_by.startswith("0000-"):
        return False
    return execution_instant(execute_by) > now


def _project_accounts(
        accounts: Sequence[Account], parsed: ParsedInstruction, *, apply_transfer: bool
) -> list[AccountSnapshotEntry]:
    projection: list[AccountSnapshotEntry] = []
    for account in accounts:
        if account.id not in (parsed.debit_account, parsed.credit_account):
            continue

        balance = account.balance
        if apply_transfer:
            if account.id == parsed.debit_account:
                balance -= parsed.amount
            else:
                balance += parsed.amount

        projection.append(
            AccountSnapshotEntry(
                id=account.id,
                balance=balance,
                balance_before=account.balance,
                currency=account.currency,
            )
        )
    return projection


def evaluate_settlement(
        parsed: ParsedInstruction,
        accounts: Sequence[Account],
        *,
        now: datetime,
) -> OutcomeRecord:
    """Validate the instruction against the snapshot and compute the outcome.

    Raises:
        InstructionError: `AC03`, `AC02`, `CU01` or `AC01`, checked in that order.
    """

    debit_account = _find_account(accounts, parsed.debit_account)
    credit_account = _find_account(accounts, parsed.credit_account)

    if debit_account.id == credit_account.id:
        raise InstructionError(errors.SAME_ACCOUNT_ERROR)

    if (
            debit_account.currency != parsed.currency
            or credit_account.currency != parsed.currency
    ):
        raise InstructionError(errors.CURRENCY_MISMATCH)

    if debit_account.balance < parsed.amount:
        raise InstructionError(errors.INSUFFICIENT_FUNDS)

    if is_future_dated(parsed.execute_by, now):
        status = TransferStatus.pending
        reason = errors.TRANSACTION_PENDING
    else:
        status = TransferStatus.successful
        reason = errors.TRANSACTION_SUCCESSFUL

    return OutcomeRecord(
        type=parsed.type,
        amount=parsed.amount,
        currency=parsed.currency,
        debit_account=parsed.debit_account,
        credit_account=parsed.credit_account,
        execute_by=parsed.execute_by,
        status=status,
        status_reason=reason.message,
        status_code=reason.code,
        accounts=_project_accounts(
            accounts, parsed, apply_transfer=status == TransferStatus.successful
        ),
    )
