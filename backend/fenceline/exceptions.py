"""Custom exception hierarchy for fenceline."""

from __future__ import annotations

from fenceline.models.enums import ValidationErrorKind


class FencelineError(Exception):
    """Base exception for all fenceline errors."""


class ValidationError(FencelineError):
    """Raised by the optional validation layer when takeoff input is unusable."""

    def __init__(self, kind: ValidationErrorKind, field: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.field = field
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "field": self.field, "message": self.message}


class PricingNotConfiguredError(FencelineError):
    """Raised when no price list exists for a fence type and height."""


class PricingDataError(FencelineError):
    """Raised when a pricing table cannot be loaded or parsed."""
