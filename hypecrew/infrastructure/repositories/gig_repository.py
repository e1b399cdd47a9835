"""
Gig repository implementation over Supabase.
"""

import logging
from typing import List

from hypecrew.domain.models.base import ValidationError
from hypecrew.domain.models.gig import Gig, GigStatus
from hypecrew.domain.repositories.gig_repository import GigRepository
from hypecrew.infrastructure.mappers.gig_mapper import GigMapper
from hypecrew.infrastructure.repositories.base import SupabaseRepository
from hypecrew.infrastructure.supabase_client import SupabaseConnection

logger = logging.getLogger(__name__)

# Each gig embeds its owner's profile row
GIG_WITH_CLIENT = "*, client:profiles(*)"


class SupabaseGigRepository(SupabaseRepository, GigRepository):
    """Supabase implementation of gig repository."""

    table_name = "gigs"

    def __init__(self, connection: SupabaseConnection):
        super().__init__(connection)
        self.mapper = GigMapper()

    async def list_open(self) -> List[Gig]:
        query = (
            self._table()
            .select(GIG_WITH_CLIENT)
            .eq("status", GigStatus.OPEN.value)
            .order("created_at", desc=True)
        )
        response = self._execute(query)
        gigs = []
        for row in response.data or []:
            try:
                gigs.append(self.mapper.row_to_domain(row))
            except (ValidationError, ValueError) as e:
                # One malformed row must not take the whole listing down
                logger.warning(f"Skipping gig {row.get('id')}: {e}")
        return gigs

    async def insert(self, gig: Gig) -> Gig:
        row = self.mapper.domain_to_row(gig)
        response = self._execute(self._table().insert(row))
        logger.info(f"Inserted gig '{gig.title}' for client {gig.client_id}")
        if not response.data:
            return gig
        return self.mapper.row_to_domain(response.data[0])

    async def get_by_id(self, gig_id: str) -> Gig:
        query = self._table().select(GIG_WITH_CLIENT).eq("id", gig_id).single()
        response = self._execute(query, "Gig", gig_id)
        return self.mapper.row_to_domain(response.data)
