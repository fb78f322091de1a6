"""Shared test doubles for the approval chain."""

from __future__ import annotations

from joshbank.approval.handler import ApprovalHandler
from joshbank.models.transaction import TransactionRequest


class RecordingObserver:
    """IEvaluationObserver that remembers every consulted handler."""

    def __init__(self) -> None:
        self.consulted: list[tuple[str, str, bool]] = []

    def on_consulted(
        self, handler: ApprovalHandler, request: TransactionRequest, matched: bool
    ) -> None:
        self.consulted.append((request.id, handler.name, matched))

    @property
    def names(self) -> list[str]:
        return [name for _, name, _ in self.consulted]

    @property
    def matches(self) -> list[str]:
        return [name for _, name, matched in self.consulted if matched]


__all__ = ["RecordingObserver"]
