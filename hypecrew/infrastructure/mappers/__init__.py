"""
Mappers between domain entities and Supabase payloads.
"""

from .profile_mapper import ProfileMapper, AuthSessionMapper, parse_datetime
from .gig_mapper import GigMapper, ApplicationMapper

__all__ = [
    "ProfileMapper",
    "AuthSessionMapper",
    "GigMapper",
    "ApplicationMapper",
    "parse_datetime",
]
