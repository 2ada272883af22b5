"""
Dashboard aggregation service.
Turns raw ledger rows and counts into the headline figures shown on the dashboard.
"""

import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from opsdesk.domain.models.base import parse_date
from opsdesk.domain.models.ledger import is_pending_remark, parse_amount
from opsdesk.domain.models.renewal import Renewal


@dataclass
class DashboardStats:
    """Headline business figures."""

    total_clients: int = 0
    total_income: float = 0.0
    total_expenses: float = 0.0
    pending_income: float = 0.0
    upcoming_expenses: float = 0.0
    renewals: List[Renewal] = field(default_factory=list)

    @property
    def net_balance(self) -> float:
        return self.total_income - self.total_expenses


class DashboardService:
    """
    Pure aggregation over rows already fetched from the store.
    Amount parsing is null-safe: unparseable amounts count as zero.
    """

    def __init__(self, pending_marker: str = "pending"):
        self.pending_marker = pending_marker.lower()

    def sum_amounts(self, rows: Iterable[Mapping[str, Any]]) -> float:
        """Sum the amount column of a row set."""
        return sum(parse_amount(row.get("amount")) for row in rows)

    def pending_total(self, rows: Iterable[Mapping[str, Any]]) -> float:
        """Sum amounts whose remark mentions the pending marker."""
        return self.sum_amounts(
            row for row in rows
            if is_pending_remark(row.get("remark"), self.pending_marker)
        )

    def upcoming_total(
        self,
        rows: Iterable[Mapping[str, Any]],
        today: Optional[datetime.date] = None
    ) -> float:
        """Sum amounts dated strictly after today; undated or bad dates are skipped."""
        today = today or datetime.date.today()
        upcoming = []
        for row in rows:
            row_date = parse_date(row.get("date"))
            if row_date is not None and row_date > today:
                upcoming.append(row)
        return self.sum_amounts(upcoming)

    def build(
        self,
        client_count: Optional[int],
        income_rows: List[Dict[str, Any]],
        expense_rows: List[Dict[str, Any]],
        renewals: List[Renewal],
        today: Optional[datetime.date] = None
    ) -> DashboardStats:
        """Assemble the dashboard figures."""
        return DashboardStats(
            total_clients=client_count or 0,
            total_income=self.sum_amounts(income_rows),
            total_expenses=self.sum_amounts(expense_rows),
            pending_income=self.pending_total(income_rows),
            upcoming_expenses=self.upcoming_total(expense_rows, today),
            renewals=renewals,
        )

