"""
Lazily created Supabase client.

Every browser session gets its own connection so auth state and the
PostgREST authorization header never leak between users.
"""

import logging
from typing import Optional

from supabase import Client, create_client

from hypecrew.config import Settings, get_settings
from hypecrew.domain.models.base import BackendServiceError

logger = logging.getLogger(__name__)


class SupabaseConnection:
    """
    Holds one Supabase client, created on first use.

    Missing configuration does not fail at construction; the first call
    that needs the backend raises BackendServiceError instead.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._client: Optional[Client] = None

    @property
    def is_configured(self) -> bool:
        return not self.settings.missing_backend_settings()

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self) -> Client:
        missing = self.settings.missing_backend_settings()
        if missing:
            raise BackendServiceError(
                f"Backend is not configured: set {', '.join(missing)}",
                "BACKEND_NOT_CONFIGURED",
            )
        try:
            return create_client(self.settings.supabase_url, self.settings.supabase_anon_key)
        except Exception as e:
            logger.error(f"Could not create Supabase client: {e}")
            raise BackendServiceError(f"Could not connect to backend: {str(e)}")

    def table(self, name: str):
        return self.client.table(name)

    def close(self) -> None:
        """Drop the client. A later call creates a fresh one."""
        self._client = None
