"""
Session layer: auth state, profile resolution and navigation.
"""

from .auth_gateway import AuthEvent, AuthGateway, AuthStateListener, Subscription
from .profile_resolver import ProfileResolver
from .session_store import SessionStore
from .navigation import Tab, View, ScreenState, NavItem, resolve_screen

__all__ = [
    "AuthEvent",
    "AuthGateway",
    "AuthStateListener",
    "Subscription",
    "ProfileResolver",
    "SessionStore",
    "Tab",
    "View",
    "ScreenState",
    "NavItem",
    "resolve_screen",
]
