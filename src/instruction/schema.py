"""Payment instruction models (Pydantic).

These models are the contract between the HTTP layer, the instruction parser and the settlement
evaluator. The raw request is shape-checked here; everything past `PaymentInstructionRequest` is
already well-typed.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InstructionType(StrEnum):
    """Grammatical form of the instruction (which keyword the sentence starts with)."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class TransferStatus(StrEnum):
    """Final state of a processed instruction."""

    successful = "successful"
    pending = "pending"
    failed = "failed"


class Account(BaseModel):
    """A caller-supplied account record, read-only for the duration of one evaluation."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    balance: int = Field(ge=0)
    currency: str

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, value: str) -> str:
        return value.upper()


class PaymentInstructionRequest(BaseModel):
    """Raw request body: the account snapshot plus the instruction sentence."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    accounts: list[Account]
    instruction: str


class ParsedInstruction(BaseModel):
    """A structurally valid transfer request produced by the grammar parser."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: InstructionType
    amount: int = Field(gt=0)
    currency: str
    debit_account: str
    credit_account: str
    execute_by: str | None = None


class AccountSnapshotEntry(BaseModel):
    """Before/after view of one account involved in the transfer."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    balance: int
    balance_before: int
    currency: str


class OutcomeRecord(BaseModel):
    """The single externally visible result of processing one instruction.

    On failure every transfer field is `None` and `accounts` is empty.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: InstructionType | None = None
    amount: int | None = None
    currency: str | None = None
    debit_account: str | None = None
    credit_account: str | None = None
    execute_by: str | None = None
    status: TransferStatus
    status_reason: str
    status_code: str
    accounts: list[AccountSnapshotEntry] = Field(default_factory=list)


def request_from_obj(obj: Any) -> PaymentInstructionRequest:
    """Validate and parse a request from an arbitrary decoded JSON object."""

    return PaymentInstructionRequest.model_validate(obj)
