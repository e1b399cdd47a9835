"""
Client-side filtering of gig listings.

Filtering is pure: the same gigs and the same filter always give the same
result, in the original order.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from hypecrew.domain.models.gig import Gig


@dataclass(frozen=True)
class GigFilter:
    """
    Active filters of the browse view.
    Empty strings and None both mean "not filtering on this".
    """

    text: Optional[str] = None
    event_type: Optional[str] = None
    style: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.text or self.event_type or self.style)

    def matches(self, gig: Gig) -> bool:
        if self.text:
            needle = self.text.lower()
            haystacks = (gig.title, gig.description, gig.location)
            if not any(needle in (value or "").lower() for value in haystacks):
                return False

        if self.event_type and gig.event_type != self.event_type:
            return False

        if self.style and not gig.matches_style(self.style):
            return False

        return True


def filter_gigs(gigs: Iterable[Gig], gig_filter: Optional[GigFilter] = None) -> List[Gig]:
    """Return the gigs matching every active filter, preserving order."""
    gigs = list(gigs)
    if gig_filter is None or gig_filter.is_empty:
        return gigs
    return [gig for gig in gigs if gig_filter.matches(gig)]
