"""
Profile repository implementation over Supabase.
"""

from typing import Optional

from hypecrew.domain.models.profile import PerformerProfile, Profile
from hypecrew.domain.repositories.profile_repository import ProfileRepository
from hypecrew.infrastructure.mappers.profile_mapper import ProfileMapper
from hypecrew.infrastructure.repositories.base import SupabaseRepository
from hypecrew.infrastructure.supabase_client import SupabaseConnection


class SupabaseProfileRepository(SupabaseRepository, ProfileRepository):
    """Supabase implementation of profile repository."""

    table_name = "profiles"

    def __init__(self, connection: SupabaseConnection):
        super().__init__(connection)
        self.mapper = ProfileMapper()

    async def get_by_id(self, profile_id: str) -> Profile:
        """Get profile by ID."""
        query = self._table().select("*").eq("id", profile_id).single()
        response = self._execute(query, "Profile", profile_id)
        return self.mapper.row_to_domain(response.data)

    async def find_performer_profile(self, user_id: str) -> Optional[PerformerProfile]:
        """Get a user's performer card with its profile."""
        query = (
            self.connection.table("performer_profiles")
            .select("*, profile:profiles(*)")
            .eq("user_id", user_id)
            .limit(1)
        )
        response = self._execute(query)
        if not response.data:
            return None
        return self.mapper.performer_row_to_domain(response.data[0])
