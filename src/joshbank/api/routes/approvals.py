"""Transaction approval endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from joshbank.approval.pipeline import EscalationPipeline
from joshbank.models.approval import ApprovalResult, BandConfig
from joshbank.models.transaction import TransactionRequest

router = APIRouter(tags=["approvals"])


def get_pipeline(request: Request) -> EscalationPipeline:
    return request.app.state.pipeline


@router.get("/bands", response_model=list[BandConfig])
async def list_bands(pipeline: EscalationPipeline = Depends(get_pipeline)) -> list[BandConfig]:
    """Return the configured approval bands in escalation order."""
    return [
        BandConfig(name=h.name, lower_bound=h.lower_bound, upper_bound=h.upper_bound)
        for h in pipeline.handlers
    ]


@router.post("/evaluate", response_model=ApprovalResult)
async def evaluate(
    transaction: TransactionRequest, pipeline: EscalationPipeline = Depends(get_pipeline)
) -> ApprovalResult:
    """Route a transaction to its approver.

    An amount no band covers comes back as ``unhandled`` with status 200;
    the caller decides whether to send it for manual review.
    """
    return pipeline.evaluate(transaction)
