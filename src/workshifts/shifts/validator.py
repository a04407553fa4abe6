from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.enums import ValidationErrorKind
from .interval import ClockInterval, format_range, overlaps
from .model import WorkShift


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error: Optional[str] = None
    kind: Optional[ValidationErrorKind] = None
    conflict: Optional[ClockInterval] = None
    conflict_name: Optional[str] = None


VALID = ValidationResult(is_valid=True)


def validate(candidate: ClockInterval, others: Iterable[ClockInterval]) -> ValidationResult:
    """Check a candidate interval against intervals it must not overlap.

    The validator knows nothing about shift identity: when a shift is being
    updated the caller leaves the shift's previous state out of ``others``.
    """
    if candidate.is_degenerate:
        return ValidationResult(
            is_valid=False,
            error="Invalid shift: start and end cannot be equal",
            kind=ValidationErrorKind.DEGENERATE_INTERVAL,
        )

    for other in others:
        if overlaps(candidate, other):
            return ValidationResult(
                is_valid=False,
                error=f"Shift times overlap with an existing shift ({format_range(other)})",
                kind=ValidationErrorKind.OVERLAPPING_SHIFT,
                conflict=other,
            )
    return VALID


def validate_shift_times(candidate: ClockInterval, existing_shifts: Iterable[WorkShift]) -> ValidationResult:
    """Validate against a business's shifts; inactive ones impose no constraint."""
    active = [s for s in existing_shifts if s.is_active]
    result = validate(candidate, (s.interval for s in active))
    if result.kind != ValidationErrorKind.OVERLAPPING_SHIFT:
        return result

    shift = next(s for s in active if s.interval == result.conflict)
    return ValidationResult(
        is_valid=False,
        error=f'Shift times overlap with existing shift "{shift.name}" ({format_range(result.conflict)})',
        kind=result.kind,
        conflict=result.conflict,
        conflict_name=shift.name,
    )
