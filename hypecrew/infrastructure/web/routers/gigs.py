"""
Gig router.
Browse open gigs and post new ones.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from hypecrew.application.dto.application_dto import ApplyToGigRequestDTO
from hypecrew.application.dto.gig_dto import (
    GigFilterDTO,
    GigFormDTO,
    GigListResponseDTO,
    PostGigFailureDTO,
    PostGigResponseDTO,
)
from hypecrew.application.use_cases.gig_use_cases import ListOpenGigsUseCase, PostGigUseCase
from hypecrew.application.use_cases.stub_use_cases import ApplyToGigUseCase, ViewGigDetailUseCase
from hypecrew.infrastructure.auth import UserSession, bind_user, require_authenticated
from hypecrew.infrastructure.web.middleware.error_handler import (
    ERROR_TITLES,
    raise_for_result,
    status_for_error_code,
)


router = APIRouter()


@router.get("", response_model=GigListResponseDTO)
async def list_gigs(
    user_session: Annotated[UserSession, Depends(require_authenticated)],
    search: Optional[str] = Query(None, description="Matches title, description or location"),
    event_type: Optional[str] = Query(None, description="Exact event type"),
    style: Optional[str] = Query(None, description="Wanted hype style"),
):
    """
    List open gigs, newest first.

    - **search**: Case-insensitive text over title, description and location
    - **event_type**: Only gigs of this event type
    - **style**: Only gigs wanting this hype style
    """
    use_case = bind_user(ListOpenGigsUseCase(user_session.gigs), user_session)
    result = await use_case.execute(
        GigFilterDTO(search=search, event_type=event_type, style=style)
    )
    raise_for_result(result)
    return result.data


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PostGigResponseDTO)
async def post_gig(
    request: GigFormDTO,
    user_session: Annotated[UserSession, Depends(require_authenticated)]
):
    """
    Post a new gig. Clients only.

    On success the form comes back cleared and `next_tab` points at browse.
    On failure the submitted form is echoed back next to the message.
    """
    use_case = bind_user(PostGigUseCase(user_session.gigs), user_session)
    result = await use_case.execute(request)

    if not result.success:
        status_code = status_for_error_code(result.error_code)
        failure = PostGigFailureDTO(
            error=ERROR_TITLES.get(status_code, "Error"),
            message=result.error or "Could not post gig",
            field=result.field,
            form=request,
        )
        raise HTTPException(status_code=status_code, detail=failure.model_dump(exclude_none=True))

    return PostGigResponseDTO(gig=result.data)


@router.get("/{gig_id}")
async def get_gig(
    gig_id: str,
    user_session: Annotated[UserSession, Depends(require_authenticated)]
):
    """Gig detail view. Coming soon."""
    use_case = bind_user(ViewGigDetailUseCase(), user_session)
    result = await use_case.execute({"gig_id": gig_id})
    raise_for_result(result, gig_id=gig_id)
    return result.data


@router.post("/{gig_id}/applications", status_code=status.HTTP_201_CREATED)
async def apply_to_gig(
    gig_id: str,
    request: ApplyToGigRequestDTO,
    user_session: Annotated[UserSession, Depends(require_authenticated)]
):
    """Apply to a gig. Coming soon."""
    use_case = bind_user(ApplyToGigUseCase(), user_session)
    result = await use_case.execute({"gig_id": gig_id, **request.model_dump()})
    raise_for_result(result, gig_id=gig_id)
    return result.data
