from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .interval import ClockInterval


@dataclass(frozen=True)
class WorkShift:
    """Domain entity: a named daily shift owned by one business.

    Times are kept as "HH:mm" strings, the way they are stored and shown.
    """

    shift_id: int
    business_id: int
    name: str
    start_time: str
    end_time: str
    color: str
    description: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @property
    def interval(self) -> ClockInterval:
        return ClockInterval.from_strings(self.start_time, self.end_time)

    def to_public(self) -> dict:
        return {
            "id": self.shift_id,
            "businessId": self.business_id,
            "name": self.name,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "color": self.color,
            "description": self.description,
            "isActive": self.is_active,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }
