"""
Gig DTOs for the application layer.
Data Transfer Objects for browsing and posting gigs.
"""

import datetime as dt
import math
from dataclasses import dataclass
from typing import List, Optional

from pydantic import Field, field_validator

from hypecrew.application.dto.base_dto import BaseDTO, RequestDTO, ResponseDTO
from hypecrew.domain.models.base import ValidationError
from hypecrew.domain.models.gig import EVENT_TYPES, HYPE_STYLES, Gig
from hypecrew.domain.models.profile import Profile, UserRole


# Required form fields, in the order the form shows them.
REQUIRED_FIELDS = [
    ("title", "Gig title"),
    ("description", "Description"),
    ("event_type", "Event type"),
    ("date", "Date"),
    ("start_time", "Start time"),
    ("location", "Location"),
    ("budget", "Budget"),
]


@dataclass(frozen=True)
class GigDraft:
    """Validated, typed content of the posting form."""

    title: str
    description: str
    event_type: str
    location: str
    date: dt.date
    start_time: dt.time
    end_time: Optional[dt.time]
    budget: float
    requirements: List[str]
    hype_styles_wanted: List[str]


class GigFormDTO(RequestDTO):
    """
    The posting form exactly as the user filled it in.
    Values stay strings so a failed submit can be echoed back untouched.
    """

    title: str = Field(default="", max_length=255)
    description: str = Field(default="", max_length=5000)
    event_type: str = Field(default="", max_length=100)
    location: str = Field(default="", max_length=255)
    date: str = Field(default="", description="YYYY-MM-DD")
    start_time: str = Field(default="", description="HH:MM")
    end_time: str = Field(default="", description="HH:MM, optional")
    budget: str = Field(default="")
    requirements: List[str] = Field(default_factory=lambda: [""])
    hype_styles_wanted: List[str] = Field(default_factory=list)
    # Accepted so older clients keep working; new gigs are always open.
    status: Optional[str] = Field(default=None, exclude=True)

    @field_validator("budget", mode="before")
    @classmethod
    def coerce_budget(cls, v):
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @classmethod
    def blank(cls) -> "GigFormDTO":
        """An empty form, as shown after a successful post."""
        return cls()

    def to_draft(self) -> GigDraft:
        """
        Validate the form.
        Raises ValidationError naming the first offending field.
        """
        for name, label in REQUIRED_FIELDS:
            if not str(getattr(self, name)).strip():
                raise ValidationError(f"{label} is required", name)

        return GigDraft(
            title=self.title.strip(),
            description=self.description.strip(),
            event_type=self.event_type.strip(),
            location=self.location.strip(),
            date=_parse_date(self.date),
            start_time=_parse_time(self.start_time, "start_time"),
            end_time=_parse_time(self.end_time, "end_time") if self.end_time.strip() else None,
            budget=_parse_budget(self.budget),
            requirements=list(self.requirements),
            hype_styles_wanted=list(self.hype_styles_wanted),
        )


def _parse_date(value: str) -> dt.date:
    try:
        return dt.date.fromisoformat(value.strip())
    except ValueError:
        raise ValidationError(f"Invalid date: {value}", "date")


def _parse_time(value: str, field: str) -> dt.time:
    try:
        return dt.time.fromisoformat(value.strip())
    except ValueError:
        raise ValidationError(f"Invalid time: {value}", field)


def _parse_budget(value: str) -> float:
    try:
        budget = float(value.strip())
    except ValueError:
        raise ValidationError(f"Budget must be a number: {value}", "budget")
    if math.isnan(budget) or math.isinf(budget):
        raise ValidationError(f"Budget must be a number: {value}", "budget")
    if budget < 0:
        raise ValidationError("Budget cannot be negative", "budget")
    return budget


class GigFilterDTO(BaseDTO):
    """Active browse filters."""

    search: Optional[str] = None
    event_type: Optional[str] = None
    style: Optional[str] = None


class ProfileSummaryDTO(ResponseDTO):
    """Public part of a profile, embedded in listings."""

    full_name: Optional[str] = None
    display_name: str
    avatar_url: Optional[str] = None
    role: UserRole

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileSummaryDTO":
        return cls(
            id=profile.id,
            full_name=profile.full_name,
            display_name=profile.display_name,
            avatar_url=profile.avatar_url,
            role=profile.role,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class GigResponseDTO(ResponseDTO):
    """Gig as shown on a card."""

    client_id: str
    title: str
    description: str
    event_type: str
    location: str
    date: Optional[dt.date] = None
    start_time: Optional[dt.time] = None
    end_time: Optional[dt.time] = None
    budget: float
    status: str
    requirements: List[str] = Field(default_factory=list)
    hype_styles_wanted: List[str] = Field(default_factory=list)
    client: Optional[ProfileSummaryDTO] = None

    @classmethod
    def from_domain(cls, gig: Gig) -> "GigResponseDTO":
        return cls(
            id=gig.id,
            client_id=gig.client_id,
            title=gig.title,
            description=gig.description,
            event_type=gig.event_type,
            location=gig.location,
            date=gig.date,
            start_time=gig.start_time,
            end_time=gig.end_time,
            budget=gig.budget,
            status=gig.status.value,
            requirements=list(gig.requirements),
            hype_styles_wanted=list(gig.hype_styles_wanted),
            client=ProfileSummaryDTO.from_domain(gig.client) if gig.client else None,
            created_at=gig.created_at,
            updated_at=gig.updated_at,
        )


class GigListResponseDTO(BaseDTO):
    """Browse view payload."""

    gigs: List[GigResponseDTO]
    total_open: int = Field(description="Open gigs before filtering")
    filters: GigFilterDTO
    show_apply_button: bool = False
    event_types: List[str] = Field(default_factory=lambda: list(EVENT_TYPES))
    hype_styles: List[str] = Field(default_factory=lambda: list(HYPE_STYLES))


class PostGigResponseDTO(BaseDTO):
    """Successful post: the stored gig plus a cleared form."""

    message: str = "Gig posted"
    gig: GigResponseDTO
    form: GigFormDTO = Field(default_factory=GigFormDTO.blank)
    next_tab: str = "browse"


class PostGigFailureDTO(BaseDTO):
    """Failed post: the message and the form as submitted."""

    error: str
    message: str
    field: Optional[str] = None
    form: GigFormDTO
