"""
Gig application repository interface.
"""

from abc import ABC, abstractmethod
from typing import List

from hypecrew.domain.models.application import GigApplication


class ApplicationRepository(ABC):
    """Read access to performers' applications."""

    @abstractmethod
    async def list_for_performer(self, performer_id: str) -> List[GigApplication]:
        """
        List a performer's own applications, newest first.
        """
        pass
