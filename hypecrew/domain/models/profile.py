"""
Identity and profile domain models.

An Identity is issued by the hosted auth service. A Profile is the
application-level row keyed by the identity id; it is created by a
server-side trigger after signup, so it can lag behind the identity.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from hypecrew.domain.models.base import BaseEntity, ValidationError


class UserRole(str, Enum):
    """Marketplace roles. Stored in the `user_type` column of `profiles`."""
    PERFORMER = "performer"
    CLIENT = "client"


class PerformerType(str, Enum):
    SOLO = "solo"
    CREW = "crew"


@dataclass(frozen=True)
class Identity:
    """Authenticated principal as reported by the auth service."""

    id: str
    email: Optional[str] = None
    email_verified: bool = False


@dataclass(frozen=True)
class AuthSession:
    """An identity together with the tokens of its current session."""

    identity: Identity
    access_token: str
    refresh_token: Optional[str] = None


@dataclass(eq=False)
class Profile(BaseEntity):
    """Application-level user record (display name, avatar, role)."""

    email: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.CLIENT

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValidationError("Profile id is required", "id")
        if self.full_name and len(self.full_name) > 255:
            raise ValidationError("Full name too long (max 255 characters)", "full_name")

    @property
    def display_name(self) -> str:
        """Full name, falling back to the local part of the email."""
        if self.full_name:
            return self.full_name
        if self.email:
            return self.email.split("@")[0]
        return "Anonymous"

    @property
    def is_performer(self) -> bool:
        return self.role is UserRole.PERFORMER

    @property
    def is_client(self) -> bool:
        return self.role is UserRole.CLIENT


@dataclass(eq=False)
class PerformerProfile(BaseEntity):
    """Public performer card, stored in `performer_profiles`."""

    user_id: str = ""
    performer_type: PerformerType = PerformerType.SOLO
    base_location: str = ""
    hourly_rate: float = 0.0
    specialties: List[str] = field(default_factory=list)
    hype_styles: List[str] = field(default_factory=list)
    bio: Optional[str] = None
    portfolio_urls: List[str] = field(default_factory=list)
    verified: bool = False
    rating: Optional[float] = None
    total_gigs: int = 0
    profile: Optional[Profile] = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if not self.user_id:
            raise ValidationError("Performer user id is required", "user_id")
        if self.hourly_rate < 0:
            raise ValidationError("Hourly rate cannot be negative", "hourly_rate")
        if self.rating is not None and not 0 <= self.rating <= 5:
            raise ValidationError("Rating must be between 0 and 5", "rating")
        if self.total_gigs < 0:
            raise ValidationError("Total gigs cannot be negative", "total_gigs")
