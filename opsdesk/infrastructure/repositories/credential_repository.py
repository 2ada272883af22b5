"""
Credential repository implementation using Supabase.
"""

from typing import Any

from opsdesk.domain.models.credential import Credential, CredentialType
from opsdesk.domain.repositories.base import ListFilters
from opsdesk.infrastructure.mappers.credential_mapper import CredentialMapper
from .base import SupabaseRepository


class SupabaseCredentialRepository(SupabaseRepository[Credential]):
    """
    Supabase implementation of the credential repository.
    Date bounds apply to the expiry date.
    """

    table = "credentials"
    search_column = "client_name"
    date_column = "expiry"
    date_is_timestamp = False
    order_column = "created_at"
    mapper = CredentialMapper()

    def _apply_filters(self, query: Any, filters: ListFilters) -> Any:
        query = super()._apply_filters(query, filters)
        if filters.category:
            query = query.eq("type", CredentialType.normalize(filters.category).value)
        return query
