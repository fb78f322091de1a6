"""Approval band configuration and evaluation outcomes."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from joshbank.core.types import HandlerName, TransactionId


class BandConfig(BaseModel):
    """Serialisable form of one approver's amount band ``[lower, upper)``."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    lower_bound: Decimal = Decimal("0")
    upper_bound: Optional[Decimal] = None  # None = unbounded

    @model_validator(mode="after")
    def _check_bounds(self) -> BandConfig:
        if self.upper_bound is not None and self.upper_bound <= self.lower_bound:
            raise ValueError(
                f"band {self.name!r}: upper_bound {self.upper_bound} must exceed "
                f"lower_bound {self.lower_bound}"
            )
        return self


class Approved(BaseModel):
    """The request was claimed by ``handler_name``."""

    model_config = ConfigDict(frozen=True)

    outcome: Literal["approved"] = "approved"
    request_id: TransactionId
    handler_name: HandlerName

    @property
    def approved(self) -> bool:
        return True


class Unhandled(BaseModel):
    """No band in the chain contains the request amount."""

    model_config = ConfigDict(frozen=True)

    outcome: Literal["unhandled"] = "unhandled"
    request_id: TransactionId

    @property
    def approved(self) -> bool:
        return False


ApprovalResult = Annotated[Union[Approved, Unhandled], Field(discriminator="outcome")]
