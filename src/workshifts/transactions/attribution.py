from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..shifts.interval import format_time_from_date
from ..shifts.repository import WorkShiftRepository
from ..shifts.resolver import find_shift_for_transaction, sort_by_start

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShiftAttribution:
    shift_id: int
    shift_name: str


class TransactionAttributionService:
    """Best-effort lookup of the shift a transaction falls into.

    Attribution feeds reports only. A failure here is logged and reported as
    "no shift" so that recording the transaction itself never fails on it.
    """

    def __init__(self, shifts: WorkShiftRepository):
        self._shifts = shifts

    def attribute(self, business_id: int, timestamp: datetime) -> Optional[ShiftAttribution]:
        try:
            active = sort_by_start(self._shifts.list_for_business(int(business_id)))
            if not active:
                logger.info("No active shifts configured for business %s", business_id)
                return None

            shift = find_shift_for_transaction(timestamp, active)
            if not shift:
                logger.info("No matching shift for business %s at %s", business_id, format_time_from_date(timestamp))
                return None

            logger.info(
                "Assigned to shift %r (%s - %s) for business %s",
                shift.name,
                shift.start_time,
                shift.end_time,
                business_id,
            )
            return ShiftAttribution(shift_id=shift.shift_id, shift_name=shift.name)
        except Exception:
            logger.exception("Error calculating work shift for business %s", business_id)
            return None
