"""
Profile router.
Performer cards and (not yet) profile editing.
"""

from typing import Annotated, Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from hypecrew.application.dto.auth_dto import PerformerProfileResponseDTO
from hypecrew.application.use_cases.performer_use_cases import GetPerformerProfileUseCase
from hypecrew.application.use_cases.stub_use_cases import EditProfileUseCase
from hypecrew.infrastructure.auth import UserSession, bind_user, require_authenticated
from hypecrew.infrastructure.web.middleware.error_handler import raise_for_result


router = APIRouter()


@router.put("/profile")
async def edit_profile(
    user_session: Annotated[UserSession, Depends(require_authenticated)],
    changes: Optional[Dict[str, Any]] = Body(None)
):
    """Edit the caller's profile. Coming soon."""
    use_case = bind_user(EditProfileUseCase(), user_session)
    result = await use_case.execute(changes)
    raise_for_result(result)
    return result.data


@router.get("/performers/{user_id}", response_model=PerformerProfileResponseDTO)
async def get_performer(
    user_id: str,
    user_session: Annotated[UserSession, Depends(require_authenticated)]
):
    """Performer card of a user."""
    use_case = bind_user(GetPerformerProfileUseCase(user_session.profiles), user_session)
    result = await use_case.execute(user_id)
    raise_for_result(result)
    return result.data
