"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from joshbank.core.config import AppSettings, ApprovalConfig, LoggingConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.logging.level == "INFO"
    assert settings.approval.require_contiguous is False


def test_default_bands_are_reference_chain():
    config = ApprovalConfig()
    assert [b.name for b in config.bands] == ["Auto-Approval", "Supervisor", "Manager", "Director"]
    assert config.bands[0].lower_bound == Decimal("0")
    assert config.bands[-1].upper_bound is None


def test_logging_env_override(monkeypatch):
    monkeypatch.setenv("JOSHBANK_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JOSHBANK_LOG_RENDERER", "json")
    config = LoggingConfig()
    assert config.level == "DEBUG"
    assert config.renderer == "json"


def test_bands_env_override(monkeypatch):
    bands = [
        {"name": "Teller", "lower_bound": 0, "upper_bound": 200},
        {"name": "Branch", "lower_bound": 200, "upper_bound": None},
    ]
    monkeypatch.setenv("JOSHBANK_APPROVAL_BANDS", json.dumps(bands))
    monkeypatch.setenv("JOSHBANK_APPROVAL_REQUIRE_CONTIGUOUS", "true")
    settings = AppSettings()
    assert [b.name for b in settings.approval.bands] == ["Teller", "Branch"]
    assert settings.approval.bands[0].upper_bound == Decimal("200")
    assert settings.approval.require_contiguous is True


def test_inverted_band_in_env_is_rejected(monkeypatch):
    bands = [{"name": "Broken", "lower_bound": 500, "upper_bound": 100}]
    monkeypatch.setenv("JOSHBANK_APPROVAL_BANDS", json.dumps(bands))
    with pytest.raises(ValidationError):
        ApprovalConfig()


def test_unknown_environment_is_rejected(monkeypatch):
    monkeypatch.setenv("JOSHBANK_ENVIRONMENT", "staging")
    with pytest.raises(ValidationError):
        AppSettings()
