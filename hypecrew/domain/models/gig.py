"""
Gig domain model.
A gig is a job listing posted by a client profile, seeking a hype performer.
"""

from dataclasses import dataclass, field
import datetime as dt
from enum import Enum
from typing import Dict, FrozenSet, List, Optional

from hypecrew.domain.models.base import (
    BaseEntity,
    BusinessRuleViolation,
    DomainEvent,
    ValidationError,
)
from hypecrew.domain.models.profile import Profile


class GigStatus(str, Enum):
    """Gig lifecycle status."""
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# Forward moves only; cancellation is allowed until the gig is finished.
ALLOWED_TRANSITIONS: Dict[GigStatus, FrozenSet[GigStatus]] = {
    GigStatus.OPEN: frozenset({GigStatus.IN_PROGRESS, GigStatus.CANCELLED}),
    GigStatus.IN_PROGRESS: frozenset({GigStatus.COMPLETED, GigStatus.CANCELLED}),
    GigStatus.COMPLETED: frozenset(),
    GigStatus.CANCELLED: frozenset(),
}

# Suggestions offered by the posting form. Tags stay free text.
HYPE_STYLES = [
    "High Energy",
    "Smooth Vibes",
    "Comedy Hype",
    "Motivational",
    "Gaming/Esports",
    "Wedding",
    "Corporate",
    "Fitness/Workout",
    "Social Media",
    "Birthday/Celebration",
]

EVENT_TYPES = [
    "Birthday Party",
    "Wedding",
    "Corporate Event",
    "Gaming Tournament",
    "Fitness Event",
    "Social Media Content",
    "Product Launch",
    "Sports Event",
    "Concert/Music",
    "Other",
]


class GigPostedEvent(DomainEvent):
    """Event raised when a client posts a new gig."""

    def __init__(self, client_id: str, title: str, event_type: str):
        super().__init__()
        self.client_id = client_id
        self.title = title
        self.event_type = event_type

    @property
    def event_name(self) -> str:
        return "gig.posted"


class GigStatusChangedEvent(DomainEvent):
    """Event raised when a gig moves through its lifecycle."""

    def __init__(self, gig_id: Optional[str], old_status: GigStatus, new_status: GigStatus):
        super().__init__()
        self.gig_id = gig_id
        self.old_status = old_status
        self.new_status = new_status

    @property
    def event_name(self) -> str:
        return "gig.status.changed"


@dataclass(eq=False)
class Gig(BaseEntity):
    """
    Gig aggregate.
    Budget is a non-negative amount; requirements and style tags are free text.
    """

    client_id: str = ""
    title: str = ""
    description: str = ""
    event_type: str = ""
    location: str = ""
    date: Optional[dt.date] = None
    start_time: Optional[dt.time] = None
    end_time: Optional[dt.time] = None
    budget: float = 0.0
    status: GigStatus = GigStatus.OPEN
    requirements: List[str] = field(default_factory=list)
    hype_styles_wanted: List[str] = field(default_factory=list)

    # Joined owner profile, present on listings
    client: Optional[Profile] = None

    def __post_init__(self):
        self.validate()

    @classmethod
    def create(
        cls,
        client_id: str,
        title: str,
        description: str,
        event_type: str,
        location: str,
        date: dt.date,
        start_time: dt.time,
        budget: float,
        end_time: Optional[dt.time] = None,
        requirements: Optional[List[str]] = None,
        hype_styles_wanted: Optional[List[str]] = None,
    ) -> "Gig":
        """
        Build a new gig for posting.
        New gigs are always open and carry only non-blank requirements.
        """
        gig = cls(
            client_id=client_id,
            title=title.strip(),
            description=description.strip(),
            event_type=event_type.strip(),
            location=location.strip(),
            date=date,
            start_time=start_time,
            end_time=end_time,
            budget=budget,
            status=GigStatus.OPEN,
            requirements=clean_requirements(requirements or []),
            hype_styles_wanted=list(hype_styles_wanted or []),
        )
        gig.add_event(GigPostedEvent(client_id, gig.title, gig.event_type))
        return gig

    def validate(self) -> None:
        if not self.client_id:
            raise ValidationError("Client id is required", "client_id")
        if not self.title:
            raise ValidationError("Gig title is required", "title")
        if len(self.title) > 255:
            raise ValidationError("Gig title too long (max 255 characters)", "title")
        if self.budget < 0:
            raise ValidationError("Budget cannot be negative", "budget")

    @property
    def is_open(self) -> bool:
        return self.status is GigStatus.OPEN

    @property
    def is_finished(self) -> bool:
        return not ALLOWED_TRANSITIONS[self.status]

    def matches_style(self, style: str) -> bool:
        return style in self.hype_styles_wanted

    def change_status(self, new_status: GigStatus) -> None:
        """Move the gig to `new_status`, enforcing the lifecycle."""
        if new_status not in ALLOWED_TRANSITIONS[self.status]:
            raise BusinessRuleViolation(
                f"Cannot move gig from {self.status.value} to {new_status.value}"
            )
        old_status = self.status
        self.status = new_status
        self.mark_as_updated()
        self.add_event(GigStatusChangedEvent(self.id, old_status, new_status))

    def start(self) -> None:
        self.change_status(GigStatus.IN_PROGRESS)

    def complete(self) -> None:
        self.change_status(GigStatus.COMPLETED)

    def cancel(self) -> None:
        self.change_status(GigStatus.CANCELLED)


def clean_requirements(requirements: List[str]) -> List[str]:
    """Trim each requirement and drop the blank ones."""
    return [req.strip() for req in requirements if req and req.strip()]
