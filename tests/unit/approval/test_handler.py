"""Tests for ApprovalHandler band matching and linking."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from joshbank.approval.handler import ApprovalHandler
from joshbank.models.approval import BandConfig


@pytest.fixture
def supervisor():
    return ApprovalHandler(name="Supervisor", lower_bound=Decimal("1000"), upper_bound=Decimal("10000"))


class TestContains:
    def test_lower_bound_is_inclusive(self, supervisor):
        assert supervisor.contains(Decimal("1000")) is True

    def test_upper_bound_is_exclusive(self, supervisor):
        assert supervisor.contains(Decimal("10000")) is False

    def test_below_band(self, supervisor):
        assert supervisor.contains(Decimal("999.99")) is False

    def test_unbounded_band_claims_large_amounts(self):
        director = ApprovalHandler(name="Director", lower_bound=Decimal("50000"))
        assert director.unbounded is True
        assert director.contains(Decimal("1000000000")) is True
        assert director.contains(Decimal("49999.99")) is False


class TestConstruction:
    def test_upper_must_exceed_lower(self):
        with pytest.raises(ValidationError):
            ApprovalHandler(name="Empty", lower_bound=Decimal("10"), upper_bound=Decimal("10"))

    def test_from_band(self):
        band = BandConfig(name="Manager", lower_bound=Decimal("10000"), upper_bound=Decimal("50000"))
        handler = ApprovalHandler.from_band(band)
        assert handler.name == "Manager"
        assert handler.upper_bound == Decimal("50000")
        assert handler.next is None

    def test_handler_is_immutable(self, supervisor):
        with pytest.raises(ValidationError):
            supervisor.lower_bound = Decimal("0")


class TestLink:
    def test_link_returns_copy(self, supervisor):
        manager = ApprovalHandler(name="Manager", lower_bound=Decimal("10000"), upper_bound=Decimal("50000"))
        linked = supervisor.link(manager)
        assert linked.next is manager
        assert supervisor.next is None

    def test_next_is_not_serialized(self, supervisor):
        manager = ApprovalHandler(name="Manager", lower_bound=Decimal("10000"))
        dumped = supervisor.link(manager).model_dump()
        assert "next" not in dumped

    def test_describe(self, supervisor):
        assert supervisor.describe() == "Supervisor [1000, 10000)"
        assert ApprovalHandler(name="Director", lower_bound=Decimal("50000")).describe() == "Director [50000, inf)"
