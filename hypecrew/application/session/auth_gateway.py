"""
Auth gateway interface.
Defines the narrow surface of the hosted auth service the session layer needs.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional, Protocol

from hypecrew.domain.models.profile import AuthSession, UserRole


class AuthEvent(str, Enum):
    """Events published on the auth state stream."""
    INITIAL_SESSION = "INITIAL_SESSION"
    SIGNED_IN = "SIGNED_IN"
    SIGNED_UP = "SIGNED_UP"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"
    USER_UPDATED = "USER_UPDATED"
    PASSWORD_RECOVERY = "PASSWORD_RECOVERY"


AuthStateListener = Callable[[AuthEvent, Optional[AuthSession]], None]


class Subscription(Protocol):
    """Handle returned by `on_auth_state_change`."""

    def unsubscribe(self) -> None:
        ...


class AuthGateway(ABC):
    """
    Auth service contract.
    Failures raise AuthenticationError (rejected credentials) or
    BackendServiceError (transport problems).
    """

    @abstractmethod
    async def get_session(self) -> Optional[AuthSession]:
        """Return the current session, if one exists."""
        pass

    @abstractmethod
    async def sign_up(
        self,
        email: str,
        password: str,
        display_name: str,
        role: UserRole
    ) -> Optional[AuthSession]:
        """
        Create an account. Returns the new session, or None when the
        account still needs email confirmation.
        """
        pass

    @abstractmethod
    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        """Authenticate with email and password."""
        pass

    @abstractmethod
    async def sign_out(self) -> None:
        """End the current session."""
        pass

    @abstractmethod
    def on_auth_state_change(self, listener: AuthStateListener) -> Subscription:
        """
        Register a listener for auth events.
        Listeners may be called from a thread other than the caller's.
        """
        pass
