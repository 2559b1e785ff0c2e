"""Instruction processing boundary (parser + settlement evaluator).

`process_instruction` is the single entry point used by the HTTP layer. It never raises for domain
failures: every error is converted into a failed `OutcomeRecord`.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from time import monotonic
from typing import Any

from src.instruction.errors import InstructionError, error_from_exception
from src.instruction.grammar import parse_instruction
from src.instruction.schema import (
    OutcomeRecord,
    PaymentInstructionRequest,
    TransferStatus,
    request_from_obj,
)
from src.settlement.evaluator import evaluate_settlement

logger = logging.getLogger(__name__)


def failed_outcome(exc: BaseException) -> OutcomeRecord:
    """Build the uniform failure record for an exception raised during processing."""

    error = error_from_exception(exc)
    return OutcomeRecord(
        status=TransferStatus.failed,
        status_reason=error.message,
        status_code=error.code,
        accounts=[],
    )


def process_instruction(
        request: PaymentInstructionRequest,
        *,
        now: datetime | None = None,
) -> OutcomeRecord:
    """Parse, validate and settle one instruction.

    Args:
        request: Shape-validated payload.
        now: Decision time. Defaults to the current UTC time; naive values are taken as UTC.
    """

    started = monotonic()
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    instruction = request.instruction.strip()
    logger.info("parsing-start instruction=%r", instruction)

    # noinspection PyBroadException
    try:
        parsed = parse_instruction(instruction)
        outcome = evaluate_settlement(parsed, request.accounts, now=now)
    except InstructionError as exc:
        latency_ms = int((monotonic() - started) * 1000)
        logger.info(
            "parse-instruction-error code=%s reason=%s latency_ms=%d",
            exc.code,
            exc.message,
            latency_ms,
        )
        return failed_outcome(exc)
    except Exception as exc:
        # Processing boundary: unclassified failures become SY03 instead of escaping.
        logger.exception("parse-instruction-error code=unclassified")
        return failed_outcome(exc)

    latency_ms = int((monotonic() - started) * 1000)
    logger.info(
        "parsing-complete type=%s status=%s code=%s latency_ms=%d",
        outcome.type,
        outcome.status,
        outcome.status_code,
        latency_ms,
    )
    return outcome


def process_payload(obj: Any, *, now: datetime | None = None) -> OutcomeRecord:
    """Shape-validate a decoded JSON object and process it.

    Raises:
        pydantic.ValidationError: If the payload does not match `PaymentInstructionRequest`.
    """

    return process_instruction(request_from_obj(obj), now=now)
