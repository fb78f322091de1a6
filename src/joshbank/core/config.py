"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from joshbank.models.approval import BandConfig


def _reference_bands() -> list[BandConfig]:
    return [
        BandConfig(name="Auto-Approval", lower_bound=Decimal("0"), upper_bound=Decimal("1000")),
        BandConfig(name="Supervisor", lower_bound=Decimal("1000"), upper_bound=Decimal("10000")),
        BandConfig(name="Manager", lower_bound=Decimal("10000"), upper_bound=Decimal("50000")),
        BandConfig(name="Director", lower_bound=Decimal("50000"), upper_bound=None),
    ]


class LoggingConfig(BaseSettings):
    """structlog output configuration."""

    model_config = {"env_prefix": "JOSHBANK_LOG_"}

    level: str = "INFO"
    renderer: Literal["console", "json"] = "console"


class ApprovalConfig(BaseSettings):
    """Approval chain bands, read once at startup."""

    model_config = {"env_prefix": "JOSHBANK_APPROVAL_"}

    bands: list[BandConfig] = Field(default_factory=_reference_bands)
    require_contiguous: bool = False  # reject gaps/overlaps at build time


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "JOSHBANK_"}

    environment: Literal["dev", "uat", "prod"] = "dev"

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    approval: ApprovalConfig = Field(default_factory=ApprovalConfig)
