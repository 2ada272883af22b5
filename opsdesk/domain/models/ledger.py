"""
Income and expense domain models.
Both are ledger entries with the same shape; expenses also carry a category.
"""

import math
from dataclasses import dataclass
import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .base import BaseEntity, RecordId, ValidationError


def parse_amount(value: Any) -> float:
    """
    Coerce a monetary input to a finite float.

    Blank, missing, non-numeric and non-finite input all become 0.0, so
    nothing like NaN or None ever reaches storage.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return 0.0
        try:
            number = float(Decimal(text))
        except (InvalidOperation, ValueError):
            return 0.0
    return number if math.isfinite(number) else 0.0


def validate_amount(value: Any) -> float:
    """
    Parse an amount for a write and reject negative values.

    Raises:
        ValidationError: If the parsed amount is below zero
    """
    amount = parse_amount(value)
    if amount < 0:
        raise ValidationError("Amount cannot be negative", "amount")
    return amount


def is_pending_remark(remark: Any, marker: str = "pending") -> bool:
    """Whether a remark flags the entry as not yet settled (case-insensitive)."""
    return marker.lower() in str(remark or "").lower()


@dataclass(eq=False)
class LedgerEntry(BaseEntity):
    """Common fields of incomes and expenses."""

    customer: str = ""
    amount: float = 0.0
    date: Optional[datetime.date] = None
    remark: str = ""
    uploaded: str = ""
    client_id: Optional[RecordId] = None

    @property
    def has_attachment(self) -> bool:
        return bool(self.uploaded)


@dataclass(eq=False)
class Income(LedgerEntry):
    """Money received from a customer."""


@dataclass(eq=False)
class Expense(LedgerEntry):
    """Money paid out."""

    category: str = ""
