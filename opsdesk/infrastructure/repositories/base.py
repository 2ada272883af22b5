"""
Base repository implementation using the Supabase async client.
Every operation is a single PostgREST call; failures surface as StorageError.
"""

import logging
from datetime import timedelta
from typing import Any, Dict, Generic, List, Optional, TypeVar

import httpx
from postgrest import APIError
from supabase import AsyncClient

from opsdesk.config import Settings, get_settings
from opsdesk.domain.models.base import (
    EntityNotFoundError, RecordId, StorageError, ValidationError
)
from opsdesk.domain.repositories.base import EntityRepository, ListFilters
from opsdesk.domain.services.auth_service import SessionProvider
from opsdesk.infrastructure.mappers.base import FieldMapper


logger = logging.getLogger(__name__)

T = TypeVar("T")


async def execute_query(query: Any, description: str) -> Any:
    """
    Run a PostgREST request and translate store failures.

    Raises:
        StorageError: Carrying the store's own message and code
    """
    try:
        return await query.execute()
    except APIError as e:
        message = e.message or str(e)
        logger.error(f"{description} failed: {message} (code={e.code})")
        raise StorageError(
            message,
            e.code,
            details={"hint": e.hint, "details": e.details}
        )
    except httpx.HTTPError as e:
        logger.error(f"{description} failed: transport error: {str(e)}")
        raise StorageError(f"{description} failed: {str(e)}", "TRANSPORT_ERROR")


def require_id(record_id: Optional[RecordId], action: str) -> RecordId:
    """
    Reject a missing identifier before any network call.

    Raises:
        ValidationError: If the id is None or an empty string
    """
    if record_id is None or (isinstance(record_id, str) and not record_id.strip()):
        raise ValidationError(f"Missing id for {action}", "id")
    return record_id


class SupabaseRepository(EntityRepository[T], Generic[T]):
    """
    Generic Supabase implementation of an entity repository.

    Subclasses name the table, the column searched by `search`, the column
    the date bounds apply to, and the column lists are ordered by.
    """

    table: str = ""
    search_column: str = ""
    date_column: str = "created_at"
    date_is_timestamp: bool = True
    order_column: str = "created_at"
    mapper: FieldMapper[T]

    def __init__(
        self,
        client: AsyncClient,
        session_provider: SessionProvider,
        settings: Optional[Settings] = None
    ):
        self.client = client
        self.session_provider = session_provider
        self.settings = settings or get_settings()

    @property
    def entity_name(self) -> str:
        return self.mapper.entity_name

    def _table(self):
        return self.client.table(self.table)

    def _apply_filters(self, query: Any, filters: ListFilters) -> Any:
        """Narrow a select query by the caller's filters."""
        if filters.search and filters.search.strip():
            query = query.ilike(self.search_column, f"%{filters.search.strip()}%")

        if filters.date_from:
            query = query.gte(self.date_column, filters.date_from.isoformat())

        if filters.date_to:
            if self.date_is_timestamp:
                # Inclusive upper bound on a timestamp means "before the next day"
                query = query.lt(self.date_column, (filters.date_to + timedelta(days=1)).isoformat())
            else:
                query = query.lte(self.date_column, filters.date_to.isoformat())

        if filters.owner_id:
            query = query.eq("owner_id", filters.owner_id)

        return query

    def _single(self, rows: Optional[List[Dict[str, Any]]], action: str, record_id: Any = None) -> Dict[str, Any]:
        """Insist that a mutation touched exactly one row."""
        rows = rows or []
        if not rows and record_id is not None:
            raise EntityNotFoundError(self.entity_name, record_id)
        if len(rows) != 1:
            raise StorageError(
                f"{self.entity_name} {action} returned {len(rows)} rows, expected 1",
                "UNEXPECTED_ROW_COUNT"
            )
        return rows[0]

    async def list(self, filters: Optional[ListFilters] = None) -> List[T]:
        """List records newest-first, capped at the configured limit."""
        filters = filters or ListFilters()
        query = (
            self._table()
            .select("*")
            .order(self.order_column, desc=True)
            .limit(self.settings.clamp_limit(filters.limit))
        )
        query = self._apply_filters(query, filters)

        response = await execute_query(query, f"{self.entity_name} list")
        return [self.mapper.to_domain(row) for row in response.data or []]

    async def get(self, record_id: RecordId) -> T:
        """Fetch one record by id."""
        require_id(record_id, "get")
        query = self._table().select("*").eq("id", record_id).limit(1)

        response = await execute_query(query, f"{self.entity_name} get")
        if not response.data:
            raise EntityNotFoundError(self.entity_name, record_id)
        return self.mapper.to_domain(response.data[0])

    async def create(self, payload: Any) -> T:
        """Normalize, stamp the owner and insert one row."""
        row = self.mapper.to_row(payload)
        row["owner_id"] = await self.session_provider.get_user_id()

        response = await execute_query(
            self._table().insert(row),
            f"{self.entity_name} create"
        )
        created = self._single(response.data, "create")
        logger.info(f"Created {self.entity_name} {created.get('id')}")
        return self.mapper.to_domain(created)

    async def update(self, record_id: RecordId, patch: Any) -> T:
        """Apply a sparse patch to one row."""
        require_id(record_id, "update")
        changes = self.mapper.to_patch(patch)

        if not changes:
            return await self.get(record_id)

        query = self._table().update(changes).eq("id", record_id)
        response = await execute_query(query, f"{self.entity_name} update")
        updated = self._single(response.data, "update", record_id)
        logger.info(f"Updated {self.entity_name} {record_id}: {', '.join(sorted(changes))}")
        return self.mapper.to_domain(updated)

    async def delete(self, record_id: RecordId) -> bool:
        """Delete by id; deleting a missing row still succeeds."""
        require_id(record_id, "delete")
        query = self._table().delete().eq("id", record_id)

        await execute_query(query, f"{self.entity_name} delete")
        logger.info(f"Deleted {self.entity_name} {record_id}")
        return True

    async def count(self, owner_id: Optional[str] = None) -> int:
        """Exact count of rows, optionally for one owner."""
        query = self._table().select("id", count="exact", head=True)
        if owner_id:
            query = query.eq("owner_id", owner_id)

        response = await execute_query(query, f"{self.entity_name} count")
        return response.count or 0
