from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional

from .interval import contains, minute_of_day, to_minutes
from .model import WorkShift


def sort_by_start(shifts: Iterable[WorkShift]) -> List[WorkShift]:
    return sorted(shifts, key=lambda s: (to_minutes(s.start_time), s.shift_id))


def resolve(instant: int, shifts: Iterable[WorkShift]) -> Optional[WorkShift]:
    """Return the active shift containing ``instant`` (minute of day), if any.

    Active shifts never overlap while the validator guards every write, but a
    concurrent create can still slip an overlap through. Then the first match
    in the caller's order wins instead of raising.
    """
    for shift in shifts:
        if shift.is_active and contains(shift.interval, instant):
            return shift
    return None


def find_shift_for_transaction(timestamp: datetime, active_shifts: Iterable[WorkShift]) -> Optional[WorkShift]:
    """Resolve the shift for a transaction instant.

    Only the hour and minute of ``timestamp`` are used, exactly as given; the
    caller is responsible for having converted it to the business's local time.
    """
    return resolve(minute_of_day(timestamp), active_shifts)
