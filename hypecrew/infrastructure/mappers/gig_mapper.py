"""
Gig mapper for converting between domain entities and PostgREST rows.
"""

import datetime as dt
from typing import Any, Dict, Optional

from hypecrew.domain.models.application import ApplicationStatus, GigApplication
from hypecrew.domain.models.gig import Gig, GigStatus
from hypecrew.infrastructure.mappers.profile_mapper import ProfileMapper, parse_datetime


def _parse_date(value: Any) -> Optional[dt.date]:
    if not value:
        return None
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(str(value)[:10])


def _parse_time(value: Any) -> Optional[dt.time]:
    if not value:
        return None
    if isinstance(value, dt.time):
        return value
    return dt.time.fromisoformat(str(value))


class GigMapper:
    """Maps between Gig entities and `gigs` rows."""

    def __init__(self, profile_mapper: Optional[ProfileMapper] = None):
        self.profile_mapper = profile_mapper or ProfileMapper()

    def domain_to_row(self, gig: Gig) -> Dict[str, Any]:
        """Convert a Gig to an insertable `gigs` row."""
        return {
            "client_id": gig.client_id,
            "title": gig.title,
            "description": gig.description,
            "event_type": gig.event_type,
            "location": gig.location,
            "date": gig.date.isoformat() if gig.date else None,
            "start_time": gig.start_time.strftime("%H:%M") if gig.start_time else None,
            "end_time": gig.end_time.strftime("%H:%M") if gig.end_time else None,
            "budget": gig.budget,
            "requirements": list(gig.requirements),
            "hype_styles_wanted": list(gig.hype_styles_wanted),
            "status": gig.status.value,
        }

    def row_to_domain(self, row: Dict[str, Any]) -> Gig:
        """Convert a `gigs` row, optionally joined with its `client` profile."""
        client = row.get("client")
        return Gig(
            id=str(row["id"]) if row.get("id") is not None else None,
            client_id=str(row["client_id"]),
            title=row.get("title") or "",
            description=row.get("description") or "",
            event_type=row.get("event_type") or "",
            location=row.get("location") or "",
            date=_parse_date(row.get("date")),
            start_time=_parse_time(row.get("start_time")),
            end_time=_parse_time(row.get("end_time")),
            budget=float(row.get("budget") or 0),
            status=GigStatus(row["status"]) if row.get("status") else GigStatus.OPEN,
            requirements=list(row.get("requirements") or []),
            hype_styles_wanted=list(row.get("hype_styles_wanted") or []),
            client=self.profile_mapper.row_to_domain(client) if client else None,
            created_at=parse_datetime(row.get("created_at")),
            updated_at=parse_datetime(row.get("updated_at")),
        )


class ApplicationMapper:
    """Maps `gig_applications` rows to GigApplication entities."""

    def row_to_domain(self, row: Dict[str, Any]) -> GigApplication:
        rate = row.get("proposed_rate")
        return GigApplication(
            id=str(row["id"]) if row.get("id") is not None else None,
            gig_id=str(row["gig_id"]),
            performer_id=str(row["performer_id"]),
            message=row.get("message") or "",
            proposed_rate=float(rate) if rate is not None else None,
            status=ApplicationStatus(row["status"]) if row.get("status") else ApplicationStatus.PENDING,
            created_at=parse_datetime(row.get("created_at")),
            updated_at=parse_datetime(row.get("updated_at")),
        )
