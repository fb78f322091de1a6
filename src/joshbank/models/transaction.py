"""Transaction request submitted for approval."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from joshbank.core.types import Amount, CustomerId, TransactionId


class TransactionKind(StrEnum):
    TRANSFER = "transfer"
    WITHDRAWAL = "withdrawal"
    DEPOSIT = "deposit"


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class TransactionRequest(BaseModel):
    """A transaction awaiting approval.

    Immutable once constructed. ``priority`` is informational and plays no
    part in routing; only ``amount`` decides which approver claims it.
    """

    model_config = ConfigDict(frozen=True)

    id: TransactionId = Field(min_length=1)
    customer_id: CustomerId = ""
    amount: Amount = Field(ge=0)
    kind: TransactionKind = TransactionKind.TRANSFER
    description: str = ""
    priority: Priority = Priority.LOW
