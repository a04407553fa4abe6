from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from ..core.enums import TransactionType
from .model import Transaction


class TransactionRepository(Protocol):
    def create(
        self,
        *,
        user_id: int,
        business_id: int,
        type: TransactionType,
        total_points_change: int,
        total_stamps_change: int,
        created_at: datetime,
        purchase_amount: Optional[float] = None,
        notes: Optional[str] = None,
        work_shift_id: Optional[int] = None,
        work_shift_name: Optional[str] = None,
    ) -> Transaction:
        raise NotImplementedError

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        raise NotImplementedError
