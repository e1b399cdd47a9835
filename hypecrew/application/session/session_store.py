"""
Session store.

Holds the authenticated identity and its profile for one browser session and
keeps them in step with the auth event stream. One store is built per
session by the session manager and torn down with `close()`.
"""

import asyncio
import logging
from typing import Optional

from hypecrew.application.session.auth_gateway import (
    AuthEvent,
    AuthGateway,
    Subscription,
)
from hypecrew.application.session.profile_resolver import ProfileResolver, Sleep
from hypecrew.domain.models.base import DomainException, EntityNotFoundError
from hypecrew.domain.models.profile import AuthSession, Identity, Profile, UserRole

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Current identity, current profile and a loading flag.

    Profile loads run as background tasks. Every identity change bumps a
    generation counter; a load finishing under an older generation is
    dropped, so a sign-out can never be undone by a late result.
    """

    def __init__(
        self,
        auth: AuthGateway,
        resolver: ProfileResolver,
        signup_delay: float = 2.0,
        sleep: Sleep = asyncio.sleep,
    ):
        self.auth = auth
        self.resolver = resolver
        self.signup_delay = signup_delay
        self._sleep = sleep

        self.session: Optional[AuthSession] = None
        self.profile: Optional[Profile] = None
        self.loading: bool = True
        self.last_error: Optional[str] = None

        self._generation = 0
        self._pending: Optional[asyncio.Task] = None
        self._subscription: Optional[Subscription] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._loaded = asyncio.Event()
        self._started = False
        self._closed = False

    async def __aenter__(self) -> "SessionStore":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def identity(self) -> Optional[Identity]:
        return self.session.identity if self.session else None

    @property
    def is_authenticated(self) -> bool:
        return self.session is not None

    @property
    def role(self) -> Optional[UserRole]:
        return self.profile.role if self.profile else None

    @property
    def closed(self) -> bool:
        return self._closed

    async def start(self) -> None:
        """Subscribe to auth events, then restore any existing session."""
        if self._started:
            return
        self._started = True
        self._loop = asyncio.get_running_loop()
        self._subscription = self.auth.on_auth_state_change(self._on_auth_state_change)

        generation = self._generation
        try:
            session = await self.auth.get_session()
        except DomainException as exc:
            logger.error(f"Could not restore session: {exc.message}")
            session = None
            self.last_error = exc.message

        if generation != self._generation:
            # An auth event arrived while restoring; it is more recent.
            return
        if session is None:
            self._finish_loading()
            return

        logger.info(f"Restored session for user {session.identity.id}")
        self.session = session
        self._begin_profile_load(session.identity.id, with_retry=False)

    async def close(self) -> None:
        """Detach from the auth stream and drop any pending profile load."""
        if self._closed:
            return
        self._closed = True
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

        pending = self._pending
        self._cancel_pending()
        self._generation += 1
        if pending is not None:
            await asyncio.gather(pending, return_exceptions=True)
        self._loaded.set()

    async def wait_until_loaded(self, timeout: Optional[float] = None) -> bool:
        """Wait for the loading flag to clear. Returns False on timeout."""
        try:
            await asyncio.wait_for(self._loaded.wait(), timeout)
        except asyncio.TimeoutError:
            return False
        return True

    # Actions. Resulting state changes arrive through the auth event stream.

    async def sign_in(self, email: str, password: str) -> AuthSession:
        return await self.auth.sign_in_with_password(email, password)

    async def sign_up(
        self,
        email: str,
        password: str,
        display_name: str,
        role: UserRole
    ) -> Optional[AuthSession]:
        return await self.auth.sign_up(email, password, display_name, role)

    async def sign_out(self) -> None:
        await self.auth.sign_out()

    # Event handling

    def _on_auth_state_change(self, event: AuthEvent, session: Optional[AuthSession]) -> None:
        if self._closed or self._loop is None:
            return
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is self._loop:
            self.handle_auth_event(event, session)
        else:
            # Token auto-refresh fires from a timer thread.
            self._loop.call_soon_threadsafe(self.handle_auth_event, event, session)

    def handle_auth_event(self, event: AuthEvent, session: Optional[AuthSession]) -> None:
        """Apply one auth event to the store. Must run on the store's loop."""
        if self._closed:
            return
        logger.info(f"Auth state change: {event.value} {session.identity.id if session else None}")

        if event is AuthEvent.SIGNED_OUT or session is None:
            self._clear()
            return

        same_identity = self.identity is not None and self.identity.id == session.identity.id
        self.session = session
        if not same_identity:
            # The previous user's profile must never answer for the new identity.
            self.profile = None
            self.last_error = None

        if event is AuthEvent.SIGNED_UP:
            logger.info("New user signed up, waiting for profile creation...")
            self._begin_profile_load(session.identity.id, with_retry=True)
            return

        if same_identity and self._load_in_flight:
            # Token refresh for the user already being loaded; keep that load.
            return
        self._begin_profile_load(session.identity.id, with_retry=False)

    @property
    def _load_in_flight(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def _begin_profile_load(self, identity_id: str, with_retry: bool) -> None:
        self._cancel_pending()
        self._generation += 1
        self.loading = True
        self._loaded.clear()
        self._pending = self._loop.create_task(
            self._load_profile(self._generation, identity_id, with_retry)
        )

    async def _load_profile(self, generation: int, identity_id: str, with_retry: bool) -> None:
        try:
            if with_retry:
                if self.signup_delay:
                    await self._sleep(self.signup_delay)
                profile = await self.resolver.resolve(identity_id)
            else:
                profile = await self.resolver.fetch(identity_id)
        except EntityNotFoundError as exc:
            # Without retry a missing row just means "no profile yet".
            outcome = (None, exc.message if with_retry else None)
        except DomainException as exc:
            logger.error(f"Error fetching profile: {exc.message}")
            outcome = (None, exc.message)
        except Exception:
            logger.exception(f"Unexpected error fetching profile for user {identity_id}")
            outcome = (None, "Failed to load profile")
        else:
            outcome = (profile, None)

        if generation != self._generation:
            logger.info(f"Discarding profile result for user {identity_id}: session changed")
            return

        self.profile, self.last_error = outcome
        self._pending = None
        self._finish_loading()

    def _clear(self) -> None:
        self._cancel_pending()
        self._generation += 1
        self.session = None
        self.profile = None
        self.last_error = None
        self._finish_loading()

    def _cancel_pending(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    def _finish_loading(self) -> None:
        self.loading = False
        self._loaded.set()
