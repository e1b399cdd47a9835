"""
Performer use cases: reading performer cards and a performer's own applications.
"""

from typing import Optional

from hypecrew.application.use_cases.base_use_case import AuthorizedUseCase, QueryUseCase
from hypecrew.application.dto.application_dto import (
    ApplicationListResponseDTO,
    ApplicationResponseDTO,
)
from hypecrew.application.dto.auth_dto import PerformerProfileResponseDTO
from hypecrew.domain.models.base import EntityNotFoundError
from hypecrew.domain.models.profile import UserRole
from hypecrew.domain.repositories.application_repository import ApplicationRepository
from hypecrew.domain.repositories.profile_repository import ProfileRepository


class GetPerformerProfileUseCase(AuthorizedUseCase, QueryUseCase[str, PerformerProfileResponseDTO]):
    """Fetch the performer card of a user."""

    def __init__(self, profile_repository: ProfileRepository):
        super().__init__()
        self.profile_repository = profile_repository

    async def _execute_business_logic(self, request: str) -> PerformerProfileResponseDTO:
        card = await self.profile_repository.find_performer_profile(request)
        if card is None:
            raise EntityNotFoundError("PerformerProfile", request)
        return PerformerProfileResponseDTO.from_domain(card)


class ListMyApplicationsUseCase(AuthorizedUseCase, QueryUseCase[Optional[str], ApplicationListResponseDTO]):
    """List the signed-in performer's applications, newest first."""

    def __init__(self, application_repository: ApplicationRepository):
        super().__init__()
        self.application_repository = application_repository

    async def _check_authorization(self, request: Optional[str]) -> None:
        self._require_role(UserRole.PERFORMER)

    async def _execute_business_logic(self, request: Optional[str]) -> ApplicationListResponseDTO:
        applications = await self.application_repository.list_for_performer(self.current_user_id)
        if request:
            applications = [a for a in applications if a.status.value == request]
        return ApplicationListResponseDTO(
            applications=[ApplicationResponseDTO.from_domain(a) for a in applications],
            total=len(applications),
        )
