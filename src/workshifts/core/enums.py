from __future__ import annotations

from enum import Enum


class ValidationErrorKind(str, Enum):
    """Why a candidate shift interval was rejected."""

    DEGENERATE_INTERVAL = "DEGENERATE_INTERVAL"
    OVERLAPPING_SHIFT = "OVERLAPPING_SHIFT"


class TransactionType(str, Enum):
    """Kinds of ledger entries a business records for a client."""

    PURCHASE = "PURCHASE"
    REDEMPTION = "REDEMPTION"
    ADJUSTMENT = "ADJUSTMENT"
