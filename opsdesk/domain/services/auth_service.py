"""
Session provider interface.
Resolves the acting user at the moment a write is issued.
"""

from abc import ABC, abstractmethod
from typing import Optional


class SessionProvider(ABC):
    """
    Source of the current authenticated principal.

    Repositories ask it on every create instead of reading a global session,
    so tests can run without a real authentication backend.
    """

    @abstractmethod
    async def get_user_id(self) -> Optional[str]:
        """
        Return the current user's id, or None when there is no session.
        Must not raise for a missing session.
        """
        pass


class StaticSessionProvider(SessionProvider):
    """Session provider with a fixed (possibly absent) user."""

    def __init__(self, user_id: Optional[str] = None):
        self.user_id = user_id

    async def get_user_id(self) -> Optional[str]:
        return self.user_id
