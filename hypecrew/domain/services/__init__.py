"""
Domain services for the HypeCrew marketplace.
"""

from .gig_filter import GigFilter, filter_gigs

__all__ = [
    "GigFilter",
    "filter_gigs",
]
