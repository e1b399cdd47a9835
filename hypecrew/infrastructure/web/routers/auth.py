"""
Authentication router.
Handles registration, login, logout and the session snapshot of the caller's browser session.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from hypecrew.application.dto.auth_dto import (
    LoginRequestDTO,
    RegisterRequestDTO,
    SessionResponseDTO,
)
from hypecrew.application.dto.base_dto import MessageResponseDTO
from hypecrew.config import get_settings
from hypecrew.domain.models.base import DomainException
from hypecrew.domain.models.profile import UserRole
from hypecrew.infrastructure.auth import (
    SessionManager,
    UserSession,
    get_session_manager,
    get_user_session,
)
from hypecrew.infrastructure.web.middleware.error_handler import http_exception_for


router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=SessionResponseDTO)
async def register(
    request: RegisterRequestDTO,
    user_session: Annotated[UserSession, Depends(get_user_session)]
):
    """
    Register a new account.

    - **email**: Valid email address
    - **password**: At least 6 characters
    - **display_name**: Name shown on gigs and performer cards
    - **role**: `performer` or `client`

    The profile row is created by the backend shortly after signup, so the
    returned snapshot is usually still loading; poll `GET /auth/session`.
    """
    try:
        session = await user_session.store.sign_up(
            email=request.email,
            password=request.password,
            display_name=request.display_name,
            role=UserRole(request.role),
        )
    except DomainException as e:
        raise http_exception_for(e)

    message = None if session else "Check your email to confirm your account"
    return SessionResponseDTO.from_store(user_session.store, message=message)


@router.post("/login", response_model=SessionResponseDTO)
async def login(
    request: LoginRequestDTO,
    user_session: Annotated[UserSession, Depends(get_user_session)]
):
    """
    Sign in with email and password.
    Answers once the caller's profile has loaded.
    """
    store = user_session.store
    try:
        await store.sign_in(email=request.email, password=request.password)
    except DomainException as e:
        raise http_exception_for(e)

    await store.wait_until_loaded(get_settings().session_load_timeout_seconds)
    return SessionResponseDTO.from_store(store)


@router.post("/logout", response_model=MessageResponseDTO)
async def logout(
    response: Response,
    user_session: Annotated[UserSession, Depends(get_user_session)],
    manager: Annotated[SessionManager, Depends(get_session_manager)]
):
    """
    Sign out and end the browser session.
    """
    try:
        await user_session.store.sign_out()
    finally:
        await manager.discard(user_session.session_id)
        response.delete_cookie(get_settings().session_cookie_name)

    return MessageResponseDTO(message="Successfully logged out")


@router.get("/session", response_model=SessionResponseDTO)
async def get_session(
    user_session: Annotated[UserSession, Depends(get_user_session)],
    wait: bool = Query(False, description="Wait for a pending profile load to finish")
):
    """
    Current identity, profile and loading flag of the caller's browser session.
    """
    store = user_session.store
    if wait:
        await store.wait_until_loaded(get_settings().session_load_timeout_seconds)
    return SessionResponseDTO.from_store(store)
