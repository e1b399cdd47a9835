"""
Gig application domain model.
A performer's bid on a gig. Reading is supported; submitting is not built yet.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hypecrew.domain.models.base import BaseEntity, BusinessRuleViolation, ValidationError
from hypecrew.domain.models.profile import PerformerProfile


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass(eq=False)
class GigApplication(BaseEntity):
    """Application aggregate (`gig_applications` relation)."""

    gig_id: str = ""
    performer_id: str = ""
    message: str = ""
    proposed_rate: Optional[float] = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    performer: Optional[PerformerProfile] = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if not self.gig_id:
            raise ValidationError("Gig id is required", "gig_id")
        if not self.performer_id:
            raise ValidationError("Performer id is required", "performer_id")
        if self.proposed_rate is not None and self.proposed_rate < 0:
            raise ValidationError("Proposed rate cannot be negative", "proposed_rate")

    @property
    def is_pending(self) -> bool:
        return self.status is ApplicationStatus.PENDING

    def _decide(self, outcome: ApplicationStatus) -> None:
        if not self.is_pending:
            raise BusinessRuleViolation(f"Application already {self.status.value}")
        self.status = outcome
        self.mark_as_updated()

    def accept(self) -> None:
        self._decide(ApplicationStatus.ACCEPTED)

    def reject(self) -> None:
        self._decide(ApplicationStatus.REJECTED)
