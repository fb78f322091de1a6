"""Type aliases used across the JoshBank approval package."""

from __future__ import annotations

from decimal import Decimal

Amount = Decimal
TransactionId = str
CustomerId = str
HandlerName = str
