"""
Repository interfaces shared by every entity.
Defines the contract for list/create/update/delete against the external store.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Any, Generic, List, Mapping, Optional, TypeVar

from opsdesk.domain.models.base import RecordId


T = TypeVar("T")


@dataclass
class ListFilters:
    """
    Optional narrowing for list calls.

    `search` is a case-insensitive substring on the entity's display field,
    the date bounds are inclusive, and `limit` falls back to the configured
    default when absent.
    """

    search: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    owner_id: Optional[str] = None
    category: Optional[str] = None
    limit: Optional[int] = None

    def matches_owner(self, owner_id: Optional[str]) -> bool:
        """Whether a row with this owner belongs in a list built from these filters."""
        return self.owner_id is None or self.owner_id == owner_id


class EntityRepository(ABC, Generic[T]):
    """
    Repository interface for one entity table.

    Payloads are UI-shaped: either a mapping or a request DTO. Only the keys
    present in an update payload are written.
    """

    @abstractmethod
    async def list(self, filters: Optional[ListFilters] = None) -> List[T]:
        """
        List records newest-first.
        Raises StorageError if the query fails.
        """
        pass

    @abstractmethod
    async def get(self, record_id: RecordId) -> T:
        """
        Fetch one record.
        Raises EntityNotFoundError if no row matches.
        """
        pass

    @abstractmethod
    async def create(self, payload: Mapping[str, Any]) -> T:
        """
        Create a record stamped with the current session's owner.
        Raises ValidationError for bad input, StorageError for store failures.
        """
        pass

    @abstractmethod
    async def update(self, record_id: RecordId, patch: Mapping[str, Any]) -> T:
        """
        Apply a sparse patch and return the updated record.
        An empty patch returns the current record unchanged.
        """
        pass

    @abstractmethod
    async def delete(self, record_id: RecordId) -> bool:
        """
        Delete by id. Succeeds whether or not a row matched.
        """
        pass

    @abstractmethod
    async def count(self, owner_id: Optional[str] = None) -> int:
        """
        Exact row count without fetching row bodies.
        """
        pass
