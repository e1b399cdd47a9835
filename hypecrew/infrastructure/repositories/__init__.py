"""
Supabase repository implementations.
"""

from .base import SupabaseRepository, NOT_FOUND_CODE
from .profile_repository import SupabaseProfileRepository
from .gig_repository import SupabaseGigRepository
from .application_repository import SupabaseApplicationRepository

__all__ = [
    "SupabaseRepository",
    "NOT_FOUND_CODE",
    "SupabaseProfileRepository",
    "SupabaseGigRepository",
    "SupabaseApplicationRepository",
]
