"""
Gig use cases for the application layer.
Implements browsing and posting gigs.
"""

import logging

from hypecrew.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CommandUseCase,
    QueryUseCase,
)
from hypecrew.application.dto.gig_dto import (
    GigFilterDTO,
    GigFormDTO,
    GigListResponseDTO,
    GigResponseDTO,
)
from hypecrew.domain.models.gig import Gig
from hypecrew.domain.models.profile import UserRole
from hypecrew.domain.repositories.gig_repository import GigRepository
from hypecrew.domain.services.gig_filter import GigFilter, filter_gigs

logger = logging.getLogger(__name__)


class ListOpenGigsUseCase(AuthorizedUseCase, QueryUseCase[GigFilterDTO, GigListResponseDTO]):
    """
    List open gigs, newest first, narrowed by the browse filters.
    The total counts every open gig so the view can say "3 of 12".
    """

    def __init__(self, gig_repository: GigRepository):
        super().__init__()
        self.gig_repository = gig_repository

    async def _execute_business_logic(self, request: GigFilterDTO) -> GigListResponseDTO:
        gigs = await self.gig_repository.list_open()
        gig_filter = GigFilter(
            text=request.search,
            event_type=request.event_type,
            style=request.style,
        )
        matches = filter_gigs(gigs, gig_filter)
        logger.info(f"Listed {len(matches)} of {len(gigs)} open gigs")

        return GigListResponseDTO(
            gigs=[GigResponseDTO.from_domain(gig) for gig in matches],
            total_open=len(gigs),
            filters=request,
            show_apply_button=self.current_role is UserRole.PERFORMER,
        )


class PostGigUseCase(AuthorizedUseCase, CommandUseCase[GigFormDTO, GigResponseDTO]):
    """Use case for a client posting a new gig."""

    def __init__(self, gig_repository: GigRepository):
        super().__init__()
        self.gig_repository = gig_repository

    async def _check_authorization(self, request: GigFormDTO) -> None:
        self._require_role(UserRole.CLIENT)

    async def _execute_command_logic(self, request: GigFormDTO) -> GigResponseDTO:
        # Everything is checked locally before the backend sees the gig
        draft = request.to_draft()

        gig = Gig.create(
            client_id=self.current_user_id,
            title=draft.title,
            description=draft.description,
            event_type=draft.event_type,
            location=draft.location,
            date=draft.date,
            start_time=draft.start_time,
            end_time=draft.end_time,
            budget=draft.budget,
            requirements=draft.requirements,
            hype_styles_wanted=draft.hype_styles_wanted,
        )

        saved = await self.gig_repository.insert(gig)
        self.events.extend(gig.pull_events())

        return GigResponseDTO.from_domain(saved)
