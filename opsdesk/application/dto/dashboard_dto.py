"""
Renewal and dashboard DTOs for the application layer.
"""

import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from opsdesk.domain.models.renewal import Renewal, expiry_status
from opsdesk.domain.services.dashboard_service import DashboardStats


class RenewalResponseDTO(BaseModel):
    """DTO for one upcoming renewal."""

    model_config = ConfigDict(from_attributes=True)

    client: str = ""
    type: str = ""
    provider: str = ""
    service_name: str = ""
    expiry: Optional[datetime.date] = None
    days_left: Optional[int] = None
    status: Optional[str] = None
    badge: str = ""

    @classmethod
    def from_domain(
        cls,
        renewal: Renewal,
        critical_days: int = 7,
        warning_days: int = 30
    ) -> "RenewalResponseDTO":
        status = expiry_status(renewal.days_left, critical_days, warning_days)
        return cls(
            client=renewal.client,
            type=renewal.type,
            provider=renewal.provider,
            service_name=renewal.service_name,
            expiry=renewal.expiry,
            days_left=renewal.days_left,
            status=status.value if status else None,
            badge=renewal.badge(),
        )


class DashboardResponseDTO(BaseModel):
    """DTO for dashboard figures."""

    total_clients: int = 0
    total_income: float = 0.0
    total_expenses: float = 0.0
    net_balance: float = 0.0
    pending_income: float = 0.0
    upcoming_expenses: float = 0.0
    renewals: List[RenewalResponseDTO] = []

    @classmethod
    def from_domain(
        cls,
        stats: DashboardStats,
        critical_days: int = 7,
        warning_days: int = 30
    ) -> "DashboardResponseDTO":
        return cls(
            total_clients=stats.total_clients,
            total_income=stats.total_income,
            total_expenses=stats.total_expenses,
            net_balance=stats.net_balance,
            pending_income=stats.pending_income,
            upcoming_expenses=stats.upcoming_expenses,
            renewals=[
                RenewalResponseDTO.from_domain(r, critical_days, warning_days)
                for r in stats.renewals
            ],
        )
