"""
Client repository implementation using Supabase.
"""

from opsdesk.domain.models.client import Client
from opsdesk.infrastructure.mappers.client_mapper import ClientMapper
from .base import SupabaseRepository


class SupabaseClientRepository(SupabaseRepository[Client]):
    """Supabase implementation of the client repository."""

    table = "clients"
    search_column = "client_name"
    date_column = "created_at"
    date_is_timestamp = True
    order_column = "created_at"
    mapper = ClientMapper()
