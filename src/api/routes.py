"""HTTP routes.

Business failures are never signalled through HTTP status codes: every processed instruction is
returned as `200 OK` and the outcome record itself says whether it succeeded.
"""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from src.instruction.processor import process_instruction
from src.instruction.schema import OutcomeRecord, PaymentInstructionRequest

router = APIRouter()


class PaymentInstructionResponse(BaseModel):
    message: str
    data: OutcomeRecord


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/payment-instructions", response_model=PaymentInstructionResponse)
def create_payment_instruction(request: PaymentInstructionRequest) -> PaymentInstructionResponse:
    outcome = process_instruction(request)
    return PaymentInstructionResponse(message="Instruction processed successfully", data=outcome)
