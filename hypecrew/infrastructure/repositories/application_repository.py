"""
Gig application repository implementation over Supabase.
"""

from typing import List

from hypecrew.domain.models.application import GigApplication
from hypecrew.domain.repositories.application_repository import ApplicationRepository
from hypecrew.infrastructure.mappers.gig_mapper import ApplicationMapper
from hypecrew.infrastructure.repositories.base import SupabaseRepository
from hypecrew.infrastructure.supabase_client import SupabaseConnection


class SupabaseApplicationRepository(SupabaseRepository, ApplicationRepository):
    """Supabase implementation of application repository."""

    table_name = "gig_applications"

    def __init__(self, connection: SupabaseConnection):
        super().__init__(connection)
        self.mapper = ApplicationMapper()

    async def list_for_performer(self, performer_id: str) -> List[GigApplication]:
        query = (
            self._table()
            .select("*")
            .eq("performer_id", performer_id)
            .order("created_at", desc=True)
        )
        response = self._execute(query)
        return [self.mapper.row_to_domain(row) for row in response.data or []]
