"""
Session dependencies for FastAPI.
Resolve the caller's browser session from its cookie.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, Response, status

from hypecrew.application.use_cases.base_use_case import AuthorizedUseCase
from hypecrew.config import get_settings
from hypecrew.infrastructure.auth.session_manager import SessionManager, UserSession


def get_session_manager(request: Request) -> SessionManager:
    """Dependency to get the application's session manager."""
    return request.app.state.session_manager


async def get_user_session(
    request: Request,
    response: Response,
    manager: Annotated[SessionManager, Depends(get_session_manager)]
) -> UserSession:
    """
    FastAPI dependency to get the caller's browser session.
    Starts a new session, and sets its cookie, when the request has none.
    """
    settings = get_settings()
    cookie = request.cookies.get(settings.session_cookie_name)
    user_session = await manager.get_or_create(cookie)

    if user_session.session_id != cookie:
        response.set_cookie(
            key=settings.session_cookie_name,
            value=user_session.session_id,
            max_age=settings.session_cookie_max_age,
            httponly=True,
            secure=settings.session_cookie_secure,
            samesite="lax",
        )
    return user_session


async def get_loaded_session(
    user_session: Annotated[UserSession, Depends(get_user_session)]
) -> UserSession:
    """Like get_user_session, but waits until the profile has loaded."""
    settings = get_settings()
    await user_session.store.wait_until_loaded(settings.session_load_timeout_seconds)
    return user_session


async def require_authenticated(
    user_session: Annotated[UserSession, Depends(get_loaded_session)]
) -> UserSession:
    """
    FastAPI dependency for endpoints that need a signed-in user.

    Raises:
        HTTPException: 401 if the session is anonymous
    """
    if not user_session.store.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="You need to sign in first",
        )
    return user_session


def bind_user(use_case: AuthorizedUseCase, user_session: UserSession) -> AuthorizedUseCase:
    """Hand the session's identity and role to a use case."""
    store = user_session.store
    use_case.set_current_user(store.identity, store.role)
    return use_case
