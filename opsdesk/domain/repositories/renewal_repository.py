"""
Renewal repository interface.
Read-only access to the server-computed upcoming renewals view.
"""

from abc import ABC, abstractmethod
from typing import List

from opsdesk.domain.models.renewal import Renewal


class RenewalRepository(ABC):
    """
    Repository interface for upcoming renewals.
    There is deliberately no write counterpart.
    """

    @abstractmethod
    async def list_renewals(self) -> List[Renewal]:
        """
        List renewals ordered by ascending expiry.
        """
        pass
