from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_SHIFT_COLOR
from .database.connection import DatabaseConnection, DBConfig
from .shifts.mysql_shift_repository import MySQLWorkShiftRepository
from .shifts.repository import WorkShiftRepository
from .shifts.service import WorkShiftService
from .transactions.attribution import TransactionAttributionService
from .transactions.mysql_transaction_repository import MySQLTransactionRepository
from .transactions.repository import TransactionRepository
from .transactions.service import TransactionService


@dataclass(frozen=True)
class Container:
    shifts_repo: WorkShiftRepository
    transactions_repo: TransactionRepository

    shift_service: WorkShiftService
    attribution_service: TransactionAttributionService
    transaction_service: TransactionService


def build_services(
    *,
    shifts_repo: WorkShiftRepository,
    transactions_repo: TransactionRepository,
    default_color: str = DEFAULT_SHIFT_COLOR,
) -> Container:
    attribution_service = TransactionAttributionService(shifts_repo)
    return Container(
        shifts_repo=shifts_repo,
        transactions_repo=transactions_repo,
        shift_service=WorkShiftService(shifts_repo, default_color=default_color),
        attribution_service=attribution_service,
        transaction_service=TransactionService(transactions_repo, attribution_service),
    )


def build_container(*, db_config: dict, default_color: str = DEFAULT_SHIFT_COLOR) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        shifts_repo=MySQLWorkShiftRepository(conn),
        transactions_repo=MySQLTransactionRepository(conn),
        default_color=default_color,
    )
