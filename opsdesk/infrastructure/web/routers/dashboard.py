"""
Renewal and dashboard routers. Both are read-only.
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends

from opsdesk.application.dto.dashboard_dto import RenewalResponseDTO, DashboardResponseDTO
from opsdesk.config import Settings, get_settings
from opsdesk.infrastructure.repositories import SupabaseRenewalRepository, SupabaseDashboardRepository
from opsdesk.infrastructure.web.dependencies import get_renewal_repository, get_dashboard_repository


renewals_router = APIRouter()
dashboard_router = APIRouter()


@renewals_router.get("", response_model=List[RenewalResponseDTO])
async def list_renewals(
    repository: Annotated[SupabaseRenewalRepository, Depends(get_renewal_repository)],
    settings: Annotated[Settings, Depends(get_settings)]
):
    """Credentials with an upcoming expiry, soonest first."""
    renewals = await repository.list_renewals()
    return [
        RenewalResponseDTO.from_domain(
            renewal, settings.renewal_critical_days, settings.renewal_window_days
        )
        for renewal in renewals
    ]


@dashboard_router.get("", response_model=DashboardResponseDTO)
async def get_dashboard(
    repository: Annotated[SupabaseDashboardRepository, Depends(get_dashboard_repository)],
    settings: Annotated[Settings, Depends(get_settings)]
):
    """
    Dashboard figures: client count, income and expense totals,
    pending income, upcoming expenses and renewals.
    """
    stats = await repository.get_stats()
    return DashboardResponseDTO.from_domain(
        stats, settings.renewal_critical_days, settings.renewal_window_days
    )
