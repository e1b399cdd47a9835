"""
Profile mapper for converting between domain entities and PostgREST rows.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from hypecrew.domain.models.profile import (
    AuthSession,
    Identity,
    PerformerProfile,
    PerformerType,
    Profile,
    UserRole,
)


def parse_datetime(value: Any) -> Optional[datetime]:
    """Parse a timestamptz column value; tolerates None and datetimes."""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


class ProfileMapper:
    """Maps between Profile / PerformerProfile entities and `profiles` / `performer_profiles` rows."""

    def row_to_domain(self, row: Dict[str, Any]) -> Profile:
        """Convert a `profiles` row to a Profile."""
        return Profile(
            id=str(row["id"]),
            email=row.get("email"),
            full_name=row.get("full_name"),
            avatar_url=row.get("avatar_url"),
            role=UserRole(row["user_type"]) if row.get("user_type") else UserRole.CLIENT,
            created_at=parse_datetime(row.get("created_at")),
            updated_at=parse_datetime(row.get("updated_at")),
        )

    def domain_to_row(self, profile: Profile) -> Dict[str, Any]:
        """Convert a Profile to a `profiles` row."""
        return {
            "id": profile.id,
            "email": profile.email,
            "full_name": profile.full_name,
            "avatar_url": profile.avatar_url,
            "user_type": profile.role.value,
        }

    def performer_row_to_domain(self, row: Dict[str, Any]) -> PerformerProfile:
        """Convert a `performer_profiles` row, optionally joined with `profile`."""
        joined = row.get("profile")
        rating = row.get("rating")
        return PerformerProfile(
            id=str(row["id"]) if row.get("id") is not None else None,
            user_id=str(row["user_id"]),
            performer_type=PerformerType(row["performer_type"]) if row.get("performer_type") else PerformerType.SOLO,
            base_location=row.get("base_location") or "",
            hourly_rate=float(row.get("hourly_rate") or 0),
            specialties=list(row.get("specialties") or []),
            hype_styles=list(row.get("hype_styles") or []),
            bio=row.get("bio"),
            portfolio_urls=list(row.get("portfolio_urls") or []),
            verified=bool(row.get("verified") or False),
            rating=float(rating) if rating is not None else None,
            total_gigs=int(row.get("total_gigs") or 0),
            profile=self.row_to_domain(joined) if joined else None,
            created_at=parse_datetime(row.get("created_at")),
            updated_at=parse_datetime(row.get("updated_at")),
        )


class AuthSessionMapper:
    """Maps Supabase auth sessions to AuthSession values."""

    def to_identity(self, user: Any) -> Identity:
        return Identity(
            id=str(user.id),
            email=getattr(user, "email", None),
            email_verified=getattr(user, "email_confirmed_at", None) is not None,
        )

    def to_domain(self, session: Any) -> Optional[AuthSession]:
        """Convert a supabase `Session`. Returns None for a missing or user-less session."""
        if session is None or getattr(session, "user", None) is None:
            return None
        return AuthSession(
            identity=self.to_identity(session.user),
            access_token=session.access_token,
            refresh_token=getattr(session, "refresh_token", None),
        )
