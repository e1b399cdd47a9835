"""
Per-browser session registry.

Each browser session gets its own Supabase connection, auth adapter,
repositories and SessionStore. Sessions are keyed by an opaque cookie value
and closed on logout, after going idle, or on application shutdown.
"""

import logging
import secrets
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from hypecrew.application.session.auth_gateway import AuthGateway
from hypecrew.application.session.profile_resolver import ProfileResolver
from hypecrew.application.session.session_store import SessionStore
from hypecrew.config import Settings, get_settings
from hypecrew.domain.repositories import (
    ApplicationRepository,
    GigRepository,
    ProfileRepository,
)
from hypecrew.infrastructure.auth.supabase_auth import SupabaseAuthService
from hypecrew.infrastructure.repositories import (
    SupabaseApplicationRepository,
    SupabaseGigRepository,
    SupabaseProfileRepository,
)
from hypecrew.infrastructure.supabase_client import SupabaseConnection

logger = logging.getLogger(__name__)


@dataclass
class UserSession:
    """Everything one browser session talks to the backend through."""

    session_id: str
    auth: AuthGateway
    profiles: ProfileRepository
    gigs: GigRepository
    applications: ApplicationRepository
    store: SessionStore
    connection: Optional[SupabaseConnection] = None

    async def close(self) -> None:
        await self.store.close()
        close_auth = getattr(self.auth, "close", None)
        if close_auth is not None:
            close_auth()
        if self.connection is not None:
            self.connection.close()


SessionFactory = Callable[[str], UserSession]


def build_user_session(session_id: str, settings: Optional[Settings] = None) -> UserSession:
    """Wire a fresh Supabase-backed session."""
    settings = settings or get_settings()
    connection = SupabaseConnection(settings)
    auth = SupabaseAuthService(connection)
    profiles = SupabaseProfileRepository(connection)
    resolver = ProfileResolver(
        profiles,
        max_attempts=settings.profile_retry_max_attempts,
        retry_delay=settings.profile_retry_delay_seconds,
    )
    store = SessionStore(
        auth,
        resolver,
        signup_delay=settings.profile_signup_initial_delay_seconds,
    )
    return UserSession(
        session_id=session_id,
        auth=auth,
        profiles=profiles,
        gigs=SupabaseGigRepository(connection),
        applications=SupabaseApplicationRepository(connection),
        store=store,
        connection=connection,
    )


class SessionManager:
    """
    Registry of live browser sessions.
    Only touched from the event loop, so no locking.

    Sessions idle for longer than `idle_timeout` seconds are closed the next
    time a session is looked up. When `max_sessions` are live, starting a new
    one closes the least recently used.
    """

    def __init__(
        self,
        factory: Optional[SessionFactory] = None,
        idle_timeout: Optional[float] = None,
        max_sessions: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        settings = get_settings()
        self._factory = factory or build_user_session
        self.idle_timeout = idle_timeout if idle_timeout is not None else settings.session_idle_timeout_seconds
        self.max_sessions = max_sessions if max_sessions is not None else settings.session_max_count
        self._clock = clock
        self._sessions: Dict[str, UserSession] = {}
        self._last_seen: Dict[str, float] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def get(self, session_id: Optional[str]) -> Optional[UserSession]:
        if not session_id:
            return None
        return self._sessions.get(session_id)

    async def get_or_create(self, session_id: Optional[str]) -> UserSession:
        """
        Return the live session for `session_id`, or start a new one.
        Unknown ids are never adopted; a new session always gets a fresh id.
        """
        now = self._clock()
        await self._evict(self._idle_ids(now))

        existing = self.get(session_id)
        if existing is not None:
            self._last_seen[session_id] = now
            return existing

        if len(self._sessions) >= self.max_sessions:
            oldest = min(self._last_seen, key=self._last_seen.get)
            logger.warning(f"Session limit of {self.max_sessions} reached, closing the least recently used")
            await self._evict([oldest])

        new_id = secrets.token_urlsafe(32)
        user_session = self._factory(new_id)
        self._sessions[new_id] = user_session
        self._last_seen[new_id] = now
        await user_session.store.start()
        logger.info(f"Started browser session ({len(self._sessions)} active)")
        return user_session

    async def discard(self, session_id: Optional[str]) -> None:
        user_session = self._pop(session_id) if session_id else None
        if user_session is not None:
            await user_session.close()
            logger.info(f"Closed browser session ({len(self._sessions)} active)")

    async def close_all(self) -> None:
        """Close every session. Called on application shutdown."""
        sessions = list(self._sessions.values())
        self._sessions.clear()
        self._last_seen.clear()
        for user_session in sessions:
            await self._close_quietly(user_session)
        logger.info(f"Closed {len(sessions)} browser sessions")

    def _idle_ids(self, now: float) -> List[str]:
        return [
            session_id
            for session_id, seen in self._last_seen.items()
            if now - seen > self.idle_timeout
        ]

    def _pop(self, session_id: str) -> Optional[UserSession]:
        self._last_seen.pop(session_id, None)
        return self._sessions.pop(session_id, None)

    async def _evict(self, session_ids: List[str]) -> None:
        for session_id in session_ids:
            user_session = self._pop(session_id)
            if user_session is not None:
                await self._close_quietly(user_session)
        if session_ids:
            logger.info(f"Expired {len(session_ids)} browser sessions ({len(self._sessions)} active)")

    async def _close_quietly(self, user_session: UserSession) -> None:
        try:
            await user_session.close()
        except Exception:
            logger.exception(f"Failed to close session {user_session.session_id[:8]}")
