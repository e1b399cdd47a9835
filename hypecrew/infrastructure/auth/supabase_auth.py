"""
Supabase authentication service.
Adapts the Supabase auth client to the AuthGateway used by session stores.
"""

import logging
from typing import Any, List, Optional

from hypecrew.application.session.auth_gateway import (
    AuthEvent,
    AuthGateway,
    AuthStateListener,
)
from hypecrew.domain.models.base import AuthenticationError, DomainException
from hypecrew.domain.models.profile import AuthSession, UserRole
from hypecrew.infrastructure.mappers.profile_mapper import AuthSessionMapper
from hypecrew.infrastructure.supabase_client import SupabaseConnection

logger = logging.getLogger(__name__)


class _ListenerSubscription:
    def __init__(self, service: "SupabaseAuthService", listener: AuthStateListener):
        self._service = service
        self._listener = listener

    def unsubscribe(self) -> None:
        self._service._remove_listener(self._listener)


class SupabaseAuthService(AuthGateway):
    """
    Service for Supabase authentication operations.

    Supabase has no sign-up event: its sign-up raises SIGNED_IN when the
    project hands out a session right away. This service swallows that
    SIGNED_IN and reports SIGNED_UP instead, so listeners know the profile
    row may still be on its way.
    """

    def __init__(self, connection: SupabaseConnection):
        self.connection = connection
        self.mapper = AuthSessionMapper()
        self._listeners: List[AuthStateListener] = []
        self._upstream: Optional[Any] = None
        self._signing_up = False

    def _auth(self):
        client = self.connection.client
        if self._upstream is None:
            self._upstream = client.auth.on_auth_state_change(self._relay)
        return client.auth

    async def get_session(self) -> Optional[AuthSession]:
        """
        Get the current session, if any.
        Without backend configuration there can be no session.
        """
        if not self.connection.is_configured:
            return None
        try:
            session = self._auth().get_session()
        except DomainException:
            raise
        except Exception as e:
            raise AuthenticationError(f"Could not restore session: {str(e)}")
        return self.mapper.to_domain(session)

    async def sign_up(
        self,
        email: str,
        password: str,
        display_name: str,
        role: UserRole
    ) -> Optional[AuthSession]:
        """
        Sign up a new user.

        Args:
            email: User email
            password: User password
            display_name: Stored as `full_name` in the user metadata
            role: Stored as `user_type` in the user metadata

        Returns:
            The new session, or None when the project requires email confirmation

        Raises:
            AuthenticationError: If sign up fails
        """
        auth = self._auth()
        self._signing_up = True
        try:
            response = auth.sign_up({
                "email": email,
                "password": password,
                "options": {
                    "data": {
                        "full_name": display_name,
                        "user_type": role.value,
                    }
                }
            })
        except DomainException:
            raise
        except Exception as e:
            raise AuthenticationError(f"Sign up failed: {str(e)}")
        finally:
            self._signing_up = False

        if response.user is None:
            raise AuthenticationError("Failed to create user account")

        session = self.mapper.to_domain(response.session)
        logger.info(f"Signed up user {response.user.id} as {role.value}")
        if session is not None:
            self._emit(AuthEvent.SIGNED_UP, session)
        return session

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        """
        Sign in a user.

        Raises:
            AuthenticationError: If the credentials are rejected
        """
        auth = self._auth()
        try:
            response = auth.sign_in_with_password({
                "email": email,
                "password": password
            })
        except DomainException:
            raise
        except Exception as e:
            raise AuthenticationError(f"Sign in failed: {str(e)}")

        session = self.mapper.to_domain(response.session)
        if session is None:
            raise AuthenticationError("Invalid email or password")
        return session

    async def sign_out(self) -> None:
        """
        Sign out the current user.
        Listeners always see SIGNED_OUT, even if the backend call fails.
        """
        if not self.connection.is_configured:
            self._emit(AuthEvent.SIGNED_OUT, None)
            return
        try:
            self._auth().sign_out()
        except Exception as e:
            # The local session is gone either way; the token expires on its own
            logger.warning(f"Sign out failed upstream: {e}")
            self._emit(AuthEvent.SIGNED_OUT, None)

    def on_auth_state_change(self, listener: AuthStateListener) -> _ListenerSubscription:
        self._listeners.append(listener)
        if self.connection.is_configured:
            self._auth()
        return _ListenerSubscription(self, listener)

    def close(self) -> None:
        """Detach from the Supabase client and forget every listener."""
        self._listeners.clear()
        if self._upstream is not None:
            self._upstream.unsubscribe()
            self._upstream = None

    def _remove_listener(self, listener: AuthStateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _relay(self, event: str, session: Any) -> None:
        """Callback registered with the Supabase client."""
        try:
            auth_event = AuthEvent(event)
        except ValueError:
            logger.debug(f"Ignoring auth event {event}")
            return
        if self._signing_up and auth_event is AuthEvent.SIGNED_IN:
            return
        self._emit(auth_event, self.mapper.to_domain(session))

    def _emit(self, event: AuthEvent, session: Optional[AuthSession]) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, session)
            except Exception:
                logger.exception(f"Auth listener failed on {event.value}")
