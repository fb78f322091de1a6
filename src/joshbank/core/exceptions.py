"""JoshBank exception hierarchy."""

from __future__ import annotations


class JoshBankError(Exception):
    """Base exception for all JoshBank errors."""


class ConfigurationError(JoshBankError):
    """Approval chain could not be built from the given handlers."""

    def __init__(self, message: str, handlers: list[str] | None = None) -> None:
        self.handlers = handlers or []
        if self.handlers:
            message = f"{message} (chain: {', '.join(self.handlers)})"
        super().__init__(message)


class BandGapError(ConfigurationError):
    """Consecutive bands leave an amount range with no approver."""

    def __init__(self, previous: str, following: str, upper: str, lower: str) -> None:
        self.previous = previous
        self.following = following
        super().__init__(
            f"Gap between {previous} (ends {upper}) and {following} (starts {lower})"
        )


class BandOverlapError(ConfigurationError):
    """Consecutive bands claim the same amounts."""

    def __init__(self, previous: str, following: str, upper: str, lower: str) -> None:
        self.previous = previous
        self.following = following
        super().__init__(
            f"Overlap between {previous} (ends {upper}) and {following} (starts {lower})"
        )
