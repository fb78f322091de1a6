"""EscalationPipeline — routes a transaction to the first approver whose band contains it."""

from __future__ import annotations

from typing import Iterable, Sequence

from joshbank.approval.handler import ApprovalHandler
from joshbank.core.exceptions import BandGapError, BandOverlapError, ConfigurationError
from joshbank.core.logger import get_logger
from joshbank.core.protocols import IEvaluationObserver
from joshbank.models.approval import ApprovalResult, Approved, Unhandled
from joshbank.models.transaction import TransactionRequest

logger = get_logger(__name__)


def validate_bands(handlers: Sequence[ApprovalHandler]) -> None:
    """Reject chains that leave amounts unrouted or route them twice.

    A valid chain starts at 0, every band ends where the next one begins,
    and only the last band is unbounded.

    Raises:
        ConfigurationError: On an empty chain, a non-zero start, an unbounded
            band before the end, or a bounded last band.
        BandGapError: Two consecutive bands leave a range uncovered.
        BandOverlapError: Two consecutive bands cover the same range.
    """
    if not handlers:
        raise ConfigurationError("Approval chain needs at least one handler")

    names = [h.name for h in handlers]
    first, last = handlers[0], handlers[-1]
    if first.lower_bound != 0:
        raise ConfigurationError(
            f"First band {first.name} must start at 0, not {first.lower_bound}", names
        )

    for previous, following in zip(handlers, handlers[1:]):
        if previous.unbounded:
            raise ConfigurationError(
                f"Unbounded band {previous.name} must be last in the chain", names
            )
        if previous.upper_bound < following.lower_bound:
            raise BandGapError(
                previous.name, following.name, str(previous.upper_bound), str(following.lower_bound)
            )
        if previous.upper_bound > following.lower_bound:
            raise BandOverlapError(
                previous.name, following.name, str(previous.upper_bound), str(following.lower_bound)
            )

    if not last.unbounded:
        raise ConfigurationError(
            f"Last band {last.name} must be unbounded, not capped at {last.upper_bound}", names
        )


class EscalationPipeline:
    """Ordered chain of approvers evaluated by a forward linear scan.

    Built once with ``build``; immutable afterwards, so a single instance can
    be shared across threads for ``evaluate`` without locking.
    """

    def __init__(self, head: ApprovalHandler, *, observer: IEvaluationObserver | None = None) -> None:
        self._head = head
        self._observer = observer

    @classmethod
    def build(
        cls,
        handlers: Iterable[ApprovalHandler],
        *,
        require_contiguous: bool = False,
        observer: IEvaluationObserver | None = None,
    ) -> EscalationPipeline:
        """Link ``handlers`` in the given order into a pipeline.

        The caller's handler objects are left untouched; linked copies are
        made from the tail forwards so each ``next`` points at the following
        handler and the last one points nowhere.

        Args:
            handlers: Approvers in escalation order.
            require_contiguous: Run ``validate_bands`` before linking.
            observer: Receives every handler consulted during ``evaluate``.

        Raises:
            ConfigurationError: ``handlers`` is empty, or fails validation
                when ``require_contiguous`` is set.
        """
        ordered = list(handlers)
        if not ordered:
            raise ConfigurationError("Approval chain needs at least one handler")
        if require_contiguous:
            validate_bands(ordered)

        successor: ApprovalHandler | None = None
        for handler in reversed(ordered):
            successor = handler.link(successor)

        logger.debug(
            "approval.pipeline.built",
            chain=[h.describe() for h in ordered],
            require_contiguous=require_contiguous,
        )
        return cls(successor, observer=observer)

    @property
    def head(self) -> ApprovalHandler:
        return self._head

    @property
    def handlers(self) -> tuple[ApprovalHandler, ...]:
        chain = []
        node: ApprovalHandler | None = self._head
        while node is not None:
            chain.append(node)
            node = node.next
        return tuple(chain)

    def evaluate(self, request: TransactionRequest) -> ApprovalResult:
        """Return the first approver whose band contains ``request.amount``.

        Handlers after the match are never consulted. ``Unhandled`` is a
        normal outcome for an amount no band covers.
        """
        log = logger.bind(request_id=request.id, amount=str(request.amount))
        node: ApprovalHandler | None = self._head
        while node is not None:
            matched = node.contains(request.amount)
            if self._observer is not None:
                self._observer.on_consulted(node, request, matched)
            if matched:
                log.debug("approval.handler.matched", handler=node.name)
                log.info("approval.approved", handler=node.name)
                return Approved(request_id=request.id, handler_name=node.name)
            log.debug("approval.handler.skipped", handler=node.name)
            node = node.next

        log.warning("approval.unhandled")
        return Unhandled(request_id=request.id)

    def evaluate_many(self, requests: Iterable[TransactionRequest]) -> list[ApprovalResult]:
        return [self.evaluate(request) for request in requests]

    def __len__(self) -> int:
        return len(self.handlers)

    def __repr__(self) -> str:
        return f"EscalationPipeline({', '.join(h.describe() for h in self.handlers)})"
