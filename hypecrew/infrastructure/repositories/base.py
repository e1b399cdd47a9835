"""
Shared plumbing for PostgREST-backed repositories.
"""

import logging
from typing import Any, Optional

from postgrest.exceptions import APIError

from hypecrew.domain.models.base import (
    BackendServiceError,
    DomainException,
    EntityNotFoundError,
)
from hypecrew.infrastructure.supabase_client import SupabaseConnection

logger = logging.getLogger(__name__)

# PostgREST's answer to `.single()` when no row matches
NOT_FOUND_CODE = "PGRST116"


class SupabaseRepository:
    """Base class for repositories over one Supabase table."""

    table_name: str = ""

    def __init__(self, connection: SupabaseConnection):
        self.connection = connection

    def _table(self):
        return self.connection.table(self.table_name)

    def _execute(self, query, entity_type: Optional[str] = None, entity_id: Any = None):
        """
        Run a query builder, translating failures into domain exceptions.
        When `entity_type` is given, a no-row answer raises EntityNotFoundError.
        """
        try:
            return query.execute()
        except APIError as e:
            if e.code == NOT_FOUND_CODE and entity_type:
                raise EntityNotFoundError(entity_type, entity_id)
            logger.error(f"{self.table_name} query failed: {e.code} {e.message}")
            raise BackendServiceError(e.message or f"Query on {self.table_name} failed")
        except DomainException:
            raise
        except Exception as e:
            logger.error(f"{self.table_name} request failed: {e}")
            raise BackendServiceError(f"Could not reach backend: {str(e)}")
