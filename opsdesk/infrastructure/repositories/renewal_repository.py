"""
Renewal repository implementation using Supabase.
Reads the `upcoming_renewals` view computed server-side from credentials.
"""

from typing import List

from supabase import AsyncClient

from opsdesk.domain.models.renewal import Renewal
from opsdesk.domain.repositories.renewal_repository import RenewalRepository
from opsdesk.infrastructure.mappers.renewal_mapper import RenewalMapper
from .base import execute_query


class SupabaseRenewalRepository(RenewalRepository):
    """Supabase implementation of the read-only renewal repository."""

    view = "upcoming_renewals"

    def __init__(self, client: AsyncClient):
        self.client = client
        self.mapper = RenewalMapper()

    async def list_renewals(self) -> List[Renewal]:
        query = self.client.table(self.view).select("*").order("expiry", desc=False)
        response = await execute_query(query, "Renewal list")
        return [self.mapper.to_domain(row) for row in response.data or []]
