"""
Live list: a local mirror of one table kept current by realtime changes.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar

from opsdesk.domain.models.base import SyncError
from opsdesk.domain.repositories.base import ListFilters
from opsdesk.infrastructure.repositories.base import SupabaseRepository
from .events import ChangeEvent, ChangeType
from .feed import ChangeFeed


logger = logging.getLogger(__name__)

T = TypeVar("T")


class SubscriptionState(str, Enum):
    """Lifecycle of a live list's subscription."""

    UNSUBSCRIBED = "unsubscribed"
    SUBSCRIBING = "subscribing"
    ACTIVE = "active"


class LiveList(Generic[T]):
    """
    Mirrors the rows a repository `list` call returns and patches them from
    the change feed: prepend on insert, replace by id on update, remove by
    id on delete.

    Changes that arrive while the initial rows load are queued and replayed
    on top of them. A change that cannot be applied is logged and answered
    with one full re-fetch. Use as an async context manager so the
    subscription is always released:

        async with LiveList(repository, feed) as incomes:
            ...
    """

    def __init__(
        self,
        repository: SupabaseRepository[T],
        feed: ChangeFeed,
        filters: Optional[ListFilters] = None
    ):
        self.repository = repository
        self.feed = feed
        self.filters = filters or ListFilters()
        self.rows: List[T] = []
        self.state = SubscriptionState.UNSUBSCRIBED
        self._handle: Any = None
        self._refetch_task: Optional[asyncio.Task] = None
        self._pending: List[Any] = []

    @property
    def table(self) -> str:
        return self.repository.table

    @property
    def is_active(self) -> bool:
        return self.state is SubscriptionState.ACTIVE

    async def __aenter__(self) -> "LiveList[T]":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    async def start(self) -> None:
        """Subscribe, then load the initial rows. Starting twice is a no-op."""
        if self.state is not SubscriptionState.UNSUBSCRIBED:
            return

        self.state = SubscriptionState.SUBSCRIBING
        try:
            self._handle = await self.feed.subscribe(self.table, self.handle_change)
            self.rows = await self.repository.list(self.filters)
        except BaseException:
            await self.stop()
            raise

        self.state = SubscriptionState.ACTIVE
        pending, self._pending = self._pending, []
        for payload in pending:
            if not self._patch(payload):
                break
        logger.info(f"Live list on {self.table} active with {len(self.rows)} rows")

    async def stop(self) -> None:
        """Release the captured subscription handle and drop pending work."""
        handle, self._handle = self._handle, None
        self.state = SubscriptionState.UNSUBSCRIBED
        self._pending = []

        if self._refetch_task is not None and not self._refetch_task.done():
            self._refetch_task.cancel()
        self._refetch_task = None

        if handle is not None:
            await self.feed.unsubscribe(handle)
            logger.info(f"Live list on {self.table} stopped")

    def handle_change(self, payload: Any) -> None:
        """Feed callback. Never raises; failures turn into a re-fetch."""
        if self.state is SubscriptionState.SUBSCRIBING:
            self._pending.append(payload)
            return
        if self.is_active:
            self._patch(payload)

    def _patch(self, payload: Any) -> bool:
        try:
            self.apply(ChangeEvent.from_payload(payload))
        except Exception as e:
            logger.warning(f"Realtime patch failed on {self.table}, refetching list: {str(e)}")
            self._schedule_refetch()
            return False
        return True

    def apply(self, event: ChangeEvent) -> None:
        """
        Apply one change to the local rows.

        Raises:
            SyncError: If the change cannot be applied
        """
        mapper = self.repository.mapper

        if event.type is ChangeType.DELETE:
            record_id = event.record_id
            if record_id is None:
                raise SyncError("DELETE change without an id", event.type.value)
            self.rows = [row for row in self.rows if row.id != record_id]
            return

        record = mapper.to_domain(event.new)
        if record.id is None:
            raise SyncError(f"{event.type.value} change without an id", event.type.value)

        if not self.filters.matches_owner(record.owner_id):
            self.rows = [row for row in self.rows if row.id != record.id]
            return

        if event.type is ChangeType.INSERT:
            if any(row.id == record.id for row in self.rows):
                self.rows = [record if row.id == record.id else row for row in self.rows]
            else:
                self.rows = [record] + self.rows
        else:
            self.rows = [record if row.id == record.id else row for row in self.rows]

    async def refresh(self) -> None:
        """Replace the local rows with a fresh list call."""
        self.rows = await self.repository.list(self.filters)

    async def wait_idle(self) -> None:
        """Wait for a pending corrective re-fetch, if any."""
        task = self._refetch_task
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    def _schedule_refetch(self) -> None:
        # Failures while a re-fetch is pending are covered by that re-fetch
        if self._refetch_task is not None and not self._refetch_task.done():
            return
        self._refetch_task = asyncio.get_running_loop().create_task(self._refetch())

    async def _refetch(self) -> None:
        try:
            await self.refresh()
        except Exception as e:
            logger.error(f"Corrective refetch of {self.table} failed: {str(e)}")
