"""
Domain repository interfaces.
Persistence itself lives in the hosted backend; these define what we ask of it.
"""

from .profile_repository import ProfileRepository
from .gig_repository import GigRepository
from .application_repository import ApplicationRepository

__all__ = [
    "ProfileRepository",
    "GigRepository",
    "ApplicationRepository",
]
