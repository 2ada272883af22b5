"""
Supabase client factory.
"""

import logging
from typing import Optional

from supabase import AsyncClient, acreate_client

from opsdesk.config import Settings, get_settings


logger = logging.getLogger(__name__)


async def create_supabase_client(settings: Optional[Settings] = None) -> AsyncClient:
    """
    Create the async Supabase client used for queries, auth and realtime.
    """
    settings = settings or get_settings()
    client = await acreate_client(settings.supabase_url, settings.supabase_anon_key)
    logger.info(f"Supabase client created for {settings.supabase_url}")
    return client
