"""ApprovalHandler — one approver bound to a half-open amount band."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from joshbank.core.types import Amount
from joshbank.models.approval import BandConfig


class ApprovalHandler(BandConfig):
    """An approver that claims requests with ``lower_bound <= amount < upper_bound``.

    Every approver shares the same matching rule and differs only in its band,
    so there is one handler type rather than a subclass per approval level.
    ``next`` is a non-owning link to the successor and is only set by
    ``EscalationPipeline.build``.
    """

    next: Optional[ApprovalHandler] = Field(default=None, exclude=True, repr=False)

    @classmethod
    def from_band(cls, band: BandConfig) -> ApprovalHandler:
        return cls(name=band.name, lower_bound=band.lower_bound, upper_bound=band.upper_bound)

    @property
    def unbounded(self) -> bool:
        return self.upper_bound is None

    def contains(self, amount: Amount) -> bool:
        if amount < self.lower_bound:
            return False
        return self.upper_bound is None or amount < self.upper_bound

    def link(self, successor: ApprovalHandler | None) -> ApprovalHandler:
        """Return a copy of this handler pointing at ``successor``."""
        return self.model_copy(update={"next": successor})

    def describe(self) -> str:
        upper = "inf" if self.unbounded else str(self.upper_bound)
        return f"{self.name} [{self.lower_bound}, {upper})"
