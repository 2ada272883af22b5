"""
Supabase session provider.
Reads the acting user from the Supabase client's cached auth session.
"""

import logging
from typing import Optional

from supabase import AsyncClient, AuthError

from opsdesk.domain.services.auth_service import SessionProvider


logger = logging.getLogger(__name__)


class SupabaseSessionProvider(SessionProvider):
    """
    Session provider backed by the Supabase auth client.
    Sign-in, refresh and sign-out are owned by Supabase; this only reads.
    """

    def __init__(self, client: AsyncClient):
        self.client = client

    async def get_user_id(self) -> Optional[str]:
        """Current user's id, or None if nobody is signed in."""
        try:
            session = await self.client.auth.get_session()
        except AuthError as e:
            logger.warning(f"Could not read auth session: {str(e)}")
            return None

        if session is None or session.user is None:
            return None
        return session.user.id
