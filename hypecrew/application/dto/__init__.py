"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import *
from .gig_dto import *
from .auth_dto import *
from .application_dto import *
from .navigation_dto import *

__all__ = [
    # Base DTOs
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "MessageResponseDTO",
    "ErrorResponseDTO",

    # Gig DTOs
    "GigDraft",
    "GigFormDTO",
    "GigFilterDTO",
    "ProfileSummaryDTO",
    "GigResponseDTO",
    "GigListResponseDTO",
    "PostGigResponseDTO",
    "PostGigFailureDTO",

    # Auth DTOs
    "RegisterRequestDTO",
    "LoginRequestDTO",
    "IdentityResponseDTO",
    "ProfileResponseDTO",
    "PerformerProfileResponseDTO",
    "SessionResponseDTO",

    # Application DTOs
    "ApplyToGigRequestDTO",
    "ApplicationResponseDTO",
    "ApplicationListResponseDTO",

    # Navigation DTOs
    "NavItemDTO",
    "ScreenResponseDTO",
]
