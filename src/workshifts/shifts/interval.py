"""Time-of-day arithmetic over shift intervals.

Clock times are handled as minute-of-day integers in ``[0, 1440)``. An
interval whose end is not after its start wraps past midnight, so
22:00-02:00 covers 22:00-24:00 and 00:00-02:00. Starts are inclusive and
ends exclusive: a shift ending at 16:00 and one starting at 16:00 touch but
do not overlap.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import List, Tuple

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import FormatError

_CLOCK = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9])")


@dataclass(frozen=True)
class ClockInterval:
    """Half-open time-of-day range, wrapping past midnight when ``end <= start``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            value = getattr(self, name)
            if not 0 <= value < MINUTES_PER_DAY:
                raise FormatError(f"{name} must be a minute of day in [0, {MINUTES_PER_DAY}), got {value!r}")

    @classmethod
    def from_strings(cls, start_time: str, end_time: str) -> "ClockInterval":
        return cls(start=to_minutes(start_time), end=to_minutes(end_time))

    @property
    def is_degenerate(self) -> bool:
        return self.start == self.end


def to_minutes(value: str) -> int:
    """Parse "HH:mm" into minutes since midnight ("08:30" -> 510)."""
    match = _CLOCK.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise FormatError(f'Invalid time {value!r}. Use HH:mm format (e.g., "08:00")')
    return int(match.group(1)) * 60 + int(match.group(2))


def format_minutes(minutes: int) -> str:
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise FormatError(f"minute of day out of range: {minutes!r}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def minute_of_day(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute


def format_time_from_date(moment: datetime) -> str:
    return format_minutes(minute_of_day(moment))


def format_range(interval: ClockInterval) -> str:
    return f"{format_minutes(interval.start)} - {format_minutes(interval.end)}"


def crosses_midnight(interval: ClockInterval) -> bool:
    return interval.end <= interval.start


def contains(interval: ClockInterval, instant: int) -> bool:
    if interval.start < interval.end:
        return interval.start <= instant < interval.end
    return instant >= interval.start or instant < interval.end


def _segments(interval: ClockInterval) -> List[Tuple[int, int]]:
    # Wrapping intervals unfold onto the doubled day [0, 2880).
    if interval.start < interval.end:
        return [(interval.start, interval.end)]
    return [(interval.start, interval.end + MINUTES_PER_DAY)]


def overlaps(a: ClockInterval, b: ClockInterval) -> bool:
    """True iff some minute of the day is contained by both intervals."""
    for a_lo, a_hi in _segments(a):
        for b_lo, b_hi in _segments(b):
            for offset in (-MINUTES_PER_DAY, 0, MINUTES_PER_DAY):
                if max(a_lo, b_lo + offset) < min(a_hi, b_hi + offset):
                    return True
    return False
