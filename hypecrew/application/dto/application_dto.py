"""
Gig application DTOs.
"""

from typing import List, Optional

from pydantic import Field

from hypecrew.application.dto.base_dto import BaseDTO, RequestDTO, ResponseDTO
from hypecrew.domain.models.application import ApplicationStatus, GigApplication


class ApplyToGigRequestDTO(RequestDTO):
    """DTO for applying to a gig."""

    message: str = Field(default="", max_length=2000, description="Pitch to the client")
    proposed_rate: Optional[float] = Field(default=None, ge=0, description="Proposed rate")


class ApplicationResponseDTO(ResponseDTO):
    gig_id: str
    performer_id: str
    message: str = ""
    proposed_rate: Optional[float] = None
    status: ApplicationStatus

    @classmethod
    def from_domain(cls, application: GigApplication) -> "ApplicationResponseDTO":
        return cls(
            id=application.id,
            gig_id=application.gig_id,
            performer_id=application.performer_id,
            message=application.message,
            proposed_rate=application.proposed_rate,
            status=application.status,
            created_at=application.created_at,
            updated_at=application.updated_at,
        )


class ApplicationListResponseDTO(BaseDTO):
    applications: List[ApplicationResponseDTO]
    total: int
