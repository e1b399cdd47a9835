"""
Gig application router.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from hypecrew.application.dto.application_dto import ApplicationListResponseDTO
from hypecrew.application.use_cases.performer_use_cases import ListMyApplicationsUseCase
from hypecrew.domain.models.application import ApplicationStatus
from hypecrew.infrastructure.auth import UserSession, bind_user, require_authenticated
from hypecrew.infrastructure.web.middleware.error_handler import raise_for_result


router = APIRouter()


@router.get("/mine", response_model=ApplicationListResponseDTO)
async def list_my_applications(
    user_session: Annotated[UserSession, Depends(require_authenticated)],
    status: Optional[ApplicationStatus] = Query(None, description="Filter by application status")
):
    """
    The caller's applications, newest first. Performers only.
    """
    use_case = bind_user(ListMyApplicationsUseCase(user_session.applications), user_session)
    result = await use_case.execute(status.value if status else None)
    raise_for_result(result)
    return result.data
