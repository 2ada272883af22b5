"""
Change feed transport.
Opens and closes per-table realtime subscriptions.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from supabase import AsyncClient

from opsdesk.config import get_settings


logger = logging.getLogger(__name__)

ChangeCallback = Callable[[Any], None]


class ChangeFeed(ABC):
    """
    Source of row change notifications.
    Reconnection after a dropped connection is the transport's job.
    """

    @abstractmethod
    async def subscribe(self, table: str, callback: ChangeCallback) -> Any:
        """
        Start delivering changes for a table to the callback.
        Returns the handle that must be passed to `unsubscribe`.
        """
        pass

    @abstractmethod
    async def unsubscribe(self, handle: Any) -> None:
        """Release exactly the subscription identified by the handle."""
        pass


class SupabaseChangeFeed(ChangeFeed):
    """Change feed over Supabase realtime channels."""

    def __init__(self, client: AsyncClient, schema: Optional[str] = None):
        self.client = client
        self.schema = schema or get_settings().realtime_schema

    async def subscribe(self, table: str, callback: ChangeCallback) -> Any:
        # A unique name per subscriber keeps two views of one table apart
        channel = self.client.channel(f"rt-{table}-{uuid.uuid4().hex[:8]}")
        channel.on_postgres_changes(
            "*",
            callback=callback,
            table=table,
            schema=self.schema
        )
        await channel.subscribe()
        logger.info(f"Subscribed to {self.schema}.{table} changes")
        return channel

    async def unsubscribe(self, handle: Any) -> None:
        await self.client.remove_channel(handle)
        logger.info("Realtime channel removed")
