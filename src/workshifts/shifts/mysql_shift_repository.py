from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import WorkShift
from .repository import WorkShiftRepository

_COLUMNS = """
    shift_id, business_id, name, start_time, end_time, color,
    description, is_active, created_at, updated_at
"""


def _row_to_shift(r: dict) -> WorkShift:
    return WorkShift(
        shift_id=int(r["shift_id"]),
        business_id=int(r["business_id"]),
        name=r["name"],
        start_time=normalize_mysql_time(r["start_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
        color=r["color"],
        description=r.get("description"),
        is_active=bool(r["is_active"]),
        created_at=r["created_at"],
        updated_at=r["updated_at"],
    )


class MySQLWorkShiftRepository(WorkShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_business(self, business_id: int, *, include_inactive: bool = False) -> Sequence[WorkShift]:
        where = "business_id=%s" if include_inactive else "business_id=%s AND is_active=1"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM work_shifts WHERE {where} ORDER BY start_time, shift_id",
                (int(business_id),),
            )
            return [_row_to_shift(r) for r in fetchall(cur)]

    def get_by_id(self, shift_id: int) -> Optional[WorkShift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM work_shifts WHERE shift_id=%s", (int(shift_id),))
            r = fetchone(cur)
            return _row_to_shift(r) if r else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_shifts
                    (business_id, name, start_time, end_time, color, description, is_active, created_at, updated_at)
                VALUES (%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(business_id), name, start_time, end_time, color, description, int(is_active), now, now),
            )
            shift_id = int(cur.lastrowid)

        return WorkShift(
            shift_id=shift_id,
            business_id=int(business_id),
            name=name,
            start_time=start_time,
            end_time=end_time,
            color=color,
            description=description,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )

    def save(self, shift: WorkShift) -> WorkShift:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_shifts
                SET name=%s, start_time=%s, end_time=%s, color=%s, description=%s, is_active=%s, updated_at=%s
                WHERE shift_id=%s
                """,
                (
                    shift.name,
                    shift.start_time,
                    shift.end_time,
                    shift.color,
                    shift.description,
                    int(shift.is_active),
                    shift.updated_at,
                    int(shift.shift_id),
                ),
            )
        return shift

    def delete(self, shift_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_shifts WHERE shift_id=%s", (int(shift_id),))
            return cur.rowcount > 0
