"""Protocol interfaces for the approval abstractions.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from joshbank.approval.handler import ApprovalHandler
    from joshbank.models.approval import ApprovalResult
    from joshbank.models.transaction import TransactionRequest


# ---------------------------------------------------------------------------
# Approval pipeline
# ---------------------------------------------------------------------------

@runtime_checkable
class IApprovalPipeline(Protocol):
    """Routes a transaction request to the approver whose band contains it."""

    @property
    def handlers(self) -> tuple[ApprovalHandler, ...]: ...

    def evaluate(self, request: TransactionRequest) -> ApprovalResult: ...

    def evaluate_many(self, requests: Iterable[TransactionRequest]) -> list[ApprovalResult]: ...


# ---------------------------------------------------------------------------
# Evaluation trace
# ---------------------------------------------------------------------------

@runtime_checkable
class IEvaluationObserver(Protocol):
    """Receives every handler consulted during an evaluation, in chain order."""

    def on_consulted(
        self, handler: ApprovalHandler, request: TransactionRequest, matched: bool
    ) -> None: ...
