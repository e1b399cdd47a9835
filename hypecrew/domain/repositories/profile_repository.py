"""
Profile repository interface.
Defines the contract for reading application-level user records.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hypecrew.domain.models.profile import PerformerProfile, Profile


class ProfileRepository(ABC):
    """Repository interface for profiles and performer cards."""

    @abstractmethod
    async def get_by_id(self, profile_id: str) -> Profile:
        """
        Fetch exactly one profile.
        Raises EntityNotFoundError when no row matches, and
        BackendServiceError for any other failure.
        """
        pass

    @abstractmethod
    async def find_performer_profile(self, user_id: str) -> Optional[PerformerProfile]:
        """
        Find the performer card of a user, joined with its profile.
        Returns None if the user has not created one.
        """
        pass
