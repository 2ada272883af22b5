"""
Dashboard data loader using Supabase.
Fetches everything the dashboard needs in parallel and aggregates it.
"""

import asyncio
import datetime
import logging
from typing import Optional

from supabase import AsyncClient

from opsdesk.config import Settings, get_settings
from opsdesk.domain.services.dashboard_service import DashboardService, DashboardStats
from .base import execute_query
from .renewal_repository import SupabaseRenewalRepository


logger = logging.getLogger(__name__)


class SupabaseDashboardRepository:
    """Loads dashboard figures; any failing query fails the whole load."""

    def __init__(self, client: AsyncClient, settings: Optional[Settings] = None):
        self.client = client
        self.settings = settings or get_settings()
        self.service = DashboardService(self.settings.pending_remark_marker)
        self.renewals = SupabaseRenewalRepository(client)

    async def get_stats(self, today: Optional[datetime.date] = None) -> DashboardStats:
        clients_query = self.client.table("clients").select("id", count="exact", head=True)
        incomes_query = self.client.table("incomes").select("amount, remark, date")
        expenses_query = self.client.table("expenses").select("amount, remark, date")

        try:
            clients, incomes, expenses, renewals = await asyncio.gather(
                execute_query(clients_query, "Dashboard client count"),
                execute_query(incomes_query, "Dashboard incomes"),
                execute_query(expenses_query, "Dashboard expenses"),
                self.renewals.list_renewals(),
            )
        except Exception as e:
            logger.error(f"Dashboard stats error: {str(e)}")
            raise

        return self.service.build(
            client_count=clients.count,
            income_rows=incomes.data or [],
            expense_rows=expenses.data or [],
            renewals=renewals,
            today=today,
        )
