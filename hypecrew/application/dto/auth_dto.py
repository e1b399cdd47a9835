"""
Auth and session DTOs for the application layer.
"""

from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from hypecrew.application.dto.base_dto import BaseDTO, RequestDTO, ResponseDTO
from hypecrew.application.dto.gig_dto import ProfileSummaryDTO
from hypecrew.application.session.session_store import SessionStore
from hypecrew.domain.models.profile import (
    Identity,
    PerformerProfile,
    PerformerType,
    Profile,
    UserRole,
)


# Request DTOs
class RegisterRequestDTO(RequestDTO):
    """DTO for sign-up requests."""

    email: EmailStr = Field(description="User email address")
    password: str = Field(min_length=6, max_length=128, description="Password")
    display_name: str = Field(min_length=1, max_length=255, description="Shown on cards and gigs")
    role: UserRole = Field(description="performer or client")

    @field_validator("display_name")
    @classmethod
    def strip_display_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Display name cannot be blank")
        return v


class LoginRequestDTO(RequestDTO):
    """DTO for password sign-in."""

    email: EmailStr = Field(description="User email address")
    password: str = Field(min_length=1, max_length=128, description="Password")


# Response DTOs
class IdentityResponseDTO(BaseDTO):
    id: str
    email: Optional[str] = None
    email_verified: bool = False

    @classmethod
    def from_domain(cls, identity: Identity) -> "IdentityResponseDTO":
        return cls(id=identity.id, email=identity.email, email_verified=identity.email_verified)


class ProfileResponseDTO(ProfileSummaryDTO):
    """Own profile, including the email address."""

    email: Optional[str] = None

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileResponseDTO":
        return cls(
            id=profile.id,
            email=profile.email,
            full_name=profile.full_name,
            display_name=profile.display_name,
            avatar_url=profile.avatar_url,
            role=profile.role,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class PerformerProfileResponseDTO(ResponseDTO):
    """Performer card."""

    user_id: str
    performer_type: PerformerType
    base_location: str = ""
    hourly_rate: float = 0.0
    specialties: List[str] = Field(default_factory=list)
    hype_styles: List[str] = Field(default_factory=list)
    bio: Optional[str] = None
    portfolio_urls: List[str] = Field(default_factory=list)
    verified: bool = False
    rating: Optional[float] = None
    total_gigs: int = 0
    profile: Optional[ProfileSummaryDTO] = None

    @classmethod
    def from_domain(cls, card: PerformerProfile) -> "PerformerProfileResponseDTO":
        return cls(
            id=card.id,
            user_id=card.user_id,
            performer_type=card.performer_type,
            base_location=card.base_location,
            hourly_rate=card.hourly_rate,
            specialties=list(card.specialties),
            hype_styles=list(card.hype_styles),
            bio=card.bio,
            portfolio_urls=list(card.portfolio_urls),
            verified=card.verified,
            rating=card.rating,
            total_gigs=card.total_gigs,
            profile=ProfileSummaryDTO.from_domain(card.profile) if card.profile else None,
            created_at=card.created_at,
            updated_at=card.updated_at,
        )


class SessionResponseDTO(BaseDTO):
    """Snapshot of a browser session's store."""

    authenticated: bool
    loading: bool
    identity: Optional[IdentityResponseDTO] = None
    profile: Optional[ProfileResponseDTO] = None
    last_error: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def from_store(cls, store: SessionStore, message: Optional[str] = None) -> "SessionResponseDTO":
        return cls(
            authenticated=store.is_authenticated,
            loading=store.loading,
            identity=IdentityResponseDTO.from_domain(store.identity) if store.identity else None,
            profile=ProfileResponseDTO.from_domain(store.profile) if store.profile else None,
            last_error=store.last_error,
            message=message,
        )
