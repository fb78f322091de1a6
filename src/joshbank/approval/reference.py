"""JoshBank reference approval bands and sample transactions."""

from __future__ import annotations

from decimal import Decimal

from joshbank.approval.handler import ApprovalHandler
from joshbank.approval.pipeline import EscalationPipeline
from joshbank.core.config import AppSettings
from joshbank.core.protocols import IEvaluationObserver
from joshbank.models.transaction import Priority, TransactionKind, TransactionRequest

REFERENCE_BANDS: tuple[ApprovalHandler, ...] = (
    ApprovalHandler(name="Auto-Approval", lower_bound=Decimal("0"), upper_bound=Decimal("1000")),
    ApprovalHandler(name="Supervisor", lower_bound=Decimal("1000"), upper_bound=Decimal("10000")),
    ApprovalHandler(name="Manager", lower_bound=Decimal("10000"), upper_bound=Decimal("50000")),
    ApprovalHandler(name="Director", lower_bound=Decimal("50000"), upper_bound=None),
)

SAMPLE_TRANSACTIONS: tuple[TransactionRequest, ...] = (
    TransactionRequest(
        id="TXN001", customer_id="CUST001", amount=Decimal("500.00"),
        kind=TransactionKind.TRANSFER, description="Payment to merchant", priority=Priority.LOW,
    ),
    TransactionRequest(
        id="TXN002", customer_id="CUST002", amount=Decimal("5000.00"),
        kind=TransactionKind.TRANSFER, description="Bill payment", priority=Priority.MEDIUM,
    ),
    TransactionRequest(
        id="TXN003", customer_id="CUST003", amount=Decimal("25000.00"),
        kind=TransactionKind.WITHDRAWAL, description="Large withdrawal", priority=Priority.HIGH,
    ),
    TransactionRequest(
        id="TXN004", customer_id="CUST004", amount=Decimal("100000.00"),
        kind=TransactionKind.TRANSFER, description="Business transfer", priority=Priority.CRITICAL,
    ),
)


def reference_pipeline(observer: IEvaluationObserver | None = None) -> EscalationPipeline:
    """Build the four-band JoshBank chain, ending in an unbounded Director band."""
    return EscalationPipeline.build(REFERENCE_BANDS, require_contiguous=True, observer=observer)


def pipeline_from_settings(
    settings: AppSettings | None = None, observer: IEvaluationObserver | None = None
) -> EscalationPipeline:
    """Build the chain described by ``settings.approval``."""
    if settings is None:
        settings = AppSettings()

    return EscalationPipeline.build(
        (ApprovalHandler.from_band(band) for band in settings.approval.bands),
        require_contiguous=settings.approval.require_contiguous,
        observer=observer,
    )
