from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.enums import TransactionType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Transaction
from .repository import TransactionRepository


class MySQLTransactionRepository(TransactionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO transactions
                    (user_id, business_id, type, purchase_amount, total_points_change, total_stamps_change,
                     notes, work_shift_id, work_shift_name, created_at)
                VALUES (%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(user_id),
                    int(business_id),
                    type.value,
                    purchase_amount,
                    int(total_points_change),
                    int(total_stamps_change),
                    notes,
                    work_shift_id,
                    work_shift_name,
                    created_at,
                ),
            )
            transaction_id = int(cur.lastrowid)

        return Transaction(
            transaction_id=transaction_id,
            user_id=int(user_id),
            business_id=int(business_id),
            type=type,
            total_points_change=int(total_points_change),
            total_stamps_change=int(total_stamps_change),
            created_at=created_at,
            purchase_amount=purchase_amount,
            notes=notes,
            work_shift_id=work_shift_id,
            work_shift_name=work_shift_name,
        )

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT transaction_id, user_id, business_id, type, purchase_amount, total_points_change,
                       total_stamps_change, notes, work_shift_id, work_shift_name, created_at
                FROM transactions
                WHERE transaction_id=%s
                """,
                (int(transaction_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Transaction(
                transaction_id=int(r["transaction_id"]),
                user_id=int(r["user_id"]),
                business_id=int(r["business_id"]),
                type=TransactionType(r["type"]),
                total_points_change=int(r["total_points_change"]),
                total_stamps_change=int(r["total_stamps_change"]),
                created_at=r["created_at"],
                purchase_amount=float(r["purchase_amount"]) if r.get("purchase_amount") is not None else None,
                notes=r.get("notes"),
                work_shift_id=int(r["work_shift_id"]) if r.get("work_shift_id") is not None else None,
                work_shift_name=r.get("work_shift_name"),
            )
