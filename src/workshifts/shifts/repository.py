from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import WorkShift


class WorkShiftRepository(Protocol):
    def list_for_business(self, business_id: int, *, include_inactive: bool = False) -> Sequence[WorkShift]:
        """Shifts of one business ordered by start time."""

        raise NotImplementedError

    def get_by_id(self, shift_id: int) -> Optional[WorkShift]:
        raise NotImplementedError

    def create(
        self,
        *,
        business_id: int,
        name: str,
        start_time: str,
        end_time: str,
        color: str,
        description: Optional[str],
        is_active: bool,
        now: datetime,
    ) -> WorkShift:
        raise NotImplementedError

    def save(self, shift: WorkShift) -> WorkShift:
        """Persist every mutable field of an existing shift."""

        raise NotImplementedError

    def delete(self, shift_id: int) -> bool:
        raise NotImplementedError
