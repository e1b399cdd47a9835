"""
Authentication infrastructure.
"""

from .supabase_auth import SupabaseAuthService
from .session_manager import SessionManager, UserSession, build_user_session
from .dependencies import (
    get_session_manager,
    get_user_session,
    get_loaded_session,
    require_authenticated,
    bind_user,
)

__all__ = [
    "SupabaseAuthService",
    "SessionManager",
    "UserSession",
    "build_user_session",
    "get_session_manager",
    "get_user_session",
    "get_loaded_session",
    "require_authenticated",
    "bind_user",
]
