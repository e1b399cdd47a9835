"""
Gig repository interface.
"""

from abc import ABC, abstractmethod
from typing import List

from hypecrew.domain.models.gig import Gig


class GigRepository(ABC):
    """Repository interface for the Gig aggregate."""

    @abstractmethod
    async def list_open(self) -> List[Gig]:
        """
        List open gigs, newest first, each joined with its client profile.
        """
        pass

    @abstractmethod
    async def insert(self, gig: Gig) -> Gig:
        """
        Insert a new gig and return it as stored.
        """
        pass

    @abstractmethod
    async def get_by_id(self, gig_id: str) -> Gig:
        """
        Fetch exactly one gig. Raises EntityNotFoundError when missing.
        """
        pass
