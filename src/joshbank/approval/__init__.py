"""Ordered-escalation approval pipeline for JoshBank transactions."""

from __future__ import annotations

from joshbank.approval.handler import ApprovalHandler
from joshbank.approval.pipeline import EscalationPipeline, validate_bands
from joshbank.approval.reference import (
    REFERENCE_BANDS,
    SAMPLE_TRANSACTIONS,
    pipeline_from_settings,
    reference_pipeline,
)

__all__ = [
    "REFERENCE_BANDS",
    "SAMPLE_TRANSACTIONS",
    "ApprovalHandler",
    "EscalationPipeline",
    "pipeline_from_settings",
    "reference_pipeline",
    "validate_bands",
]
