from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..common.validators import optional_text
from ..core.enums import TransactionType
from ..core.exceptions import NotFoundError, ValidationError
from .attribution import TransactionAttributionService
from .model import Transaction
from .repository import TransactionRepository


class TransactionService:
    def __init__(
        self,
        transactions: TransactionRepository,
        attribution: TransactionAttributionService,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._transactions = transactions
        self._attribution = attribution
        self._clock = clock

    def create_transaction(
        self,
        *,
        user_id: int,
        business_id: int,
        type: TransactionType,
        total_points_change: int = 0,
        total_stamps_change: int = 0,
        purchase_amount: Optional[float] = None,
        notes: Optional[str] = None,
    ) -> Transaction:
        if int(user_id) <= 0:
            raise ValidationError("Invalid user")
        if int(business_id) <= 0:
            raise ValidationError("Invalid business")
        if purchase_amount is not None and purchase_amount < 0:
            raise ValidationError("purchaseAmount cannot be negative")

        now = self._clock()
        attribution = self._attribution.attribute(int(business_id), now)

        return self._transactions.create(
            user_id=int(user_id),
            business_id=int(business_id),
            type=type,
            total_points_change=int(total_points_change),
            total_stamps_change=int(total_stamps_change),
            created_at=now,
            purchase_amount=purchase_amount,
            notes=optional_text(notes, "notes"),
            work_shift_id=attribution.shift_id if attribution else None,
            work_shift_name=attribution.shift_name if attribution else None,
        )

    def get(self, transaction_id: int) -> Transaction:
        tx = self._transactions.get_by_id(int(transaction_id))
        if not tx:
            raise NotFoundError("Transaction not found")
        return tx
