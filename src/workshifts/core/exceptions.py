from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..shifts.validator import ValidationResult


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class FormatError(ValidationError):
    """Raised when a clock-time string is not a valid "HH:mm" value."""


class ShiftValidationError(ValidationError):
    """Raised when a shift interval is rejected (zero length or overlapping)."""

    def __init__(self, result: "ValidationResult"):
        super().__init__(result.error)
        self.result = result


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""
