from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """Domain entity: one ledger entry between a client and a business.

    ``work_shift_id``/``work_shift_name`` are copied at creation time and are
    never refreshed, so they keep showing the shift that was active then even
    after the shift is renamed, moved or deleted.
    """

    transaction_id: int
    user_id: int
    business_id: int
    type: TransactionType
    total_points_change: int
    total_stamps_change: int
    created_at: datetime
    purchase_amount: Optional[float] = None
    notes: Optional[str] = None
    work_shift_id: Optional[int] = None
    work_shift_name: Optional[str] = None

    def to_public(self) -> dict:
        return {
            "id": self.transaction_id,
            "userId": self.user_id,
            "businessId": self.business_id,
            "type": self.type.value,
            "purchaseAmount": self.purchase_amount,
            "totalPointsChange": self.total_points_change,
            "totalStampsChange": self.total_stamps_change,
            "notes": self.notes,
            "workShiftId": self.work_shift_id,
            "workShiftName": self.work_shift_name,
            "createdAt": self.created_at.isoformat(),
        }
