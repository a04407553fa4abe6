from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_hex_color, require_non_empty
from ..core.constants import DEFAULT_SHIFT_COLOR
from ..core.exceptions import NotFoundError, ShiftValidationError
from .interval import ClockInterval, format_minutes, to_minutes
from .model import WorkShift
from .repository import WorkShiftRepository
from .validator import validate, validate_shift_times

logger = logging.getLogger(__name__)


class WorkShiftService:
    """Create, edit and (de)activate shifts while keeping active ones disjoint.

    Every write validates against a snapshot of the business's active shifts
    read just before it. Two concurrent writes for the same business can both
    pass against snapshots that miss each other and persist an overlap; callers
    needing a hard guarantee must serialize writes per business (advisory lock
    or a constraint-backed retry) around these methods.
    """

    def __init__(
        self,
        shifts: WorkShiftRepository,
        *,
        default_color: str = DEFAULT_SHIFT_COLOR,
        clock: Callable[[], datetime] = now_local,
    ):
        self._shifts = shifts
        self._default_color = default_color
        self._clock = clock

    @staticmethod
    def _clock_time(value: str) -> str:
        # Round-trips "HH:mm" so only canonical strings reach storage.
        return format_minutes(to_minutes(value))

    def _get_or_raise(self, shift_id: int) -> WorkShift:
        shift = self._shifts.get_by_id(int(shift_id))
        if not shift:
            raise NotFoundError("Work shift not found")
        return shift

    def _others_active(self, shift: WorkShift) -> list[WorkShift]:
        return [
            s
            for s in self._shifts.list_for_business(shift.business_id)
            if s.is_active and s.shift_id != shift.shift_id
        ]

    def list_for_business(self, business_id: int, *, include_inactive: bool = False) -> Sequence[WorkShift]:
        return self._shifts.list_for_business(int(business_id), include_inactive=include_inactive)

    def list_active(self, business_id: int) -> Sequence[WorkShift]:
        return self._shifts.list_for_business(int(business_id), include_inactive=False)

    def get(self, shift_id: int) -> WorkShift:
        return self._get_or_raise(shift_id)

    def create(
        self,
        *,
        business_id: int,
        name: str,
        start_time: str,
        end_time: str,
        color: Optional[str] = None,
        description: Optional[str] = None,
    ) -> WorkShift:
        name = require_non_empty(name, "name")
        start_time = self._clock_time(start_time)
        end_time = self._clock_time(end_time)
        color = require_hex_color(color) if color else self._default_color

        candidate = ClockInterval.from_strings(start_time, end_time)
        result = validate_shift_times(candidate, self.list_active(business_id))
        if not result.is_valid:
            raise ShiftValidationError(result)

        shift = self._shifts.create(
            business_id=int(business_id),
            name=name,
            start_time=start_time,
            end_time=end_time,
            color=color,
            description=optional_text(description),
            is_active=True,
            now=self._clock(),
        )
        logger.info("Created work shift %s %r (%s-%s) for business %s", shift.shift_id, name, start_time, end_time, business_id)
        return shift

    def update(
        self,
        shift_id: int,
        *,
        name: Optional[str] = None,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        color: Optional[str] = None,
        description: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> WorkShift:
        """Apply the given fields; ``None`` leaves a field unchanged.

        An empty ``description`` clears it.
        """
        current = self._get_or_raise(shift_id)

        merged = replace(
            current,
            name=require_non_empty(name, "name") if name is not None else current.name,
            start_time=self._clock_time(start_time) if start_time is not None else current.start_time,
            end_time=self._clock_time(end_time) if end_time is not None else current.end_time,
            color=require_hex_color(color) if color is not None else current.color,
            description=optional_text(description) if description is not None else current.description,
            is_active=bool(is_active) if is_active is not None else current.is_active,
        )

        interval_changed = (merged.start_time, merged.end_time) != (current.start_time, current.end_time)
        reactivated = merged.is_active and not current.is_active
        if interval_changed or reactivated:
            if merged.is_active:
                result = validate_shift_times(merged.interval, self._others_active(current))
            else:
                result = validate(merged.interval, [])
            if not result.is_valid:
                raise ShiftValidationError(result)

        saved = self._shifts.save(replace(merged, updated_at=self._clock()))
        logger.info("Updated work shift %s", saved.shift_id)
        return saved

    def delete(self, shift_id: int) -> None:
        # Transactions keep their denormalized shift name; nothing to cascade.
        if not self._shifts.delete(int(shift_id)):
            raise NotFoundError("Work shift not found")
        logger.info("Deleted work shift %s", shift_id)

    def toggle_active(self, shift_id: int) -> WorkShift:
        current = self._get_or_raise(shift_id)

        if not current.is_active:
            # Shifts created while this one was inactive may now conflict with it.
            result = validate_shift_times(current.interval, self._others_active(current))
            if not result.is_valid:
                raise ShiftValidationError(result)

        saved = self._shifts.save(replace(current, is_active=not current.is_active, updated_at=self._clock()))
        logger.info("Work shift %s is now %s", saved.shift_id, "active" if saved.is_active else "inactive")
        return saved
