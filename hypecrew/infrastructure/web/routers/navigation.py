"""
Navigation router.
Tells the shell which view each tab shows, and answers the tabs that are not built yet.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from hypecrew.application.dto.navigation_dto import ScreenResponseDTO
from hypecrew.application.session.navigation import Tab, resolve_screen
from hypecrew.application.use_cases.stub_use_cases import MessagesUseCase
from hypecrew.infrastructure.auth import (
    UserSession,
    bind_user,
    get_user_session,
    require_authenticated,
)
from hypecrew.infrastructure.web.middleware.error_handler import raise_for_result


router = APIRouter()


@router.get("/navigation", response_model=ScreenResponseDTO)
async def navigation(
    user_session: Annotated[UserSession, Depends(get_user_session)],
    tab: Tab = Query(Tab.BROWSE, description="Requested tab")
):
    """
    Resolve the screen for a tab.

    Answers `loading` while the profile is still on its way; the shell
    should ask again.
    """
    store = user_session.store
    screen = resolve_screen(
        tab,
        authenticated=store.is_authenticated,
        loading=store.loading,
        role=store.role,
    )
    return ScreenResponseDTO.from_state(screen)


@router.get("/messages")
async def messages(
    user_session: Annotated[UserSession, Depends(require_authenticated)]
):
    """Conversations. Coming soon."""
    use_case = bind_user(MessagesUseCase(), user_session)
    result = await use_case.execute(None)
    raise_for_result(result)
    return result.data
