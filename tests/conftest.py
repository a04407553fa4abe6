from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from workshifts.core.enums import TransactionType
from workshifts.shifts.interval import to_minutes
from workshifts.shifts.model import WorkShift
from workshifts.transactions.model import Transaction

CREATED = datetime(2025, 12, 1, 9, 0, 0)


class InMemoryWorkShifts:
    def __init__(self):
        self._by_id: dict[int, WorkShift] = {}
        self._id = 0

    def add(self, *, business_id: int, name: str, start_time: str, end_time: str, is_active: bool = True) -> WorkShift:
        return self.create(
            business_id=business_id,
            name=name,
            start_time=start_time,
            end_time=end_time,
            color="#3B82F6",
            description=None,
            is_active=is_active,
            now=CREATED,
        )

    def list_for_business(self, business_id: int, *, include_inactive: bool = False):
        items = [
            s for s in self._by_id.values() if s.business_id == business_id and (include_inactive or s.is_active)
        ]
        items.sort(key=lambda s: (to_minutes(s.start_time), s.shift_id))
        return items

    def get_by_id(self, shift_id: int) -> Optional[WorkShift]:
        return self._by_id.get(shift_id)

    def create(self, *, business_id, name, start_time, end_time, color, description, is_active, now) -> WorkShift:
        self._id += 1
        shift = WorkShift(
            shift_id=self._id,
            business_id=business_id,
            name=name,
            start_time=start_time,
            end_time=end_time,
            color=color,
            description=description,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )
        self._by_id[self._id] = shift
        return shift

    def save(self, shift: WorkShift) -> WorkShift:
        self._by_id[shift.shift_id] = shift
        return shift

    def delete(self, shift_id: int) -> bool:
        return self._by_id.pop(shift_id, None) is not None


class InMemoryTransactions:
    def __init__(self):
        self._by_id: dict[int, Transaction] = {}
        self._id = 0

    def create(self, **fields) -> Transaction:
        self._id += 1
        tx = Transaction(transaction_id=self._id, **fields)
        self._by_id[self._id] = tx
        return tx

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        return self._by_id.get(transaction_id)


@pytest.fixture
def shifts_repo() -> InMemoryWorkShifts:
    return InMemoryWorkShifts()


@pytest.fixture
def transactions_repo() -> InMemoryTransactions:
    return InMemoryTransactions()


def make_shift(shift_id: int, name: str, start_time: str, end_time: str, *, is_active: bool = True) -> WorkShift:
    return WorkShift(
        shift_id=shift_id,
        business_id=1,
        name=name,
        start_time=start_time,
        end_time=end_time,
        color="#3B82F6",
        description=None,
        is_active=is_active,
        created_at=CREATED,
        updated_at=CREATED,
    )


@pytest.fixture
def shift_factory():
    return make_shift


@pytest.fixture
def purchase():
    return dict(user_id=7, business_id=1, type=TransactionType.PURCHASE, total_points_change=10)


