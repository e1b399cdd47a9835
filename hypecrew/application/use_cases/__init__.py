"""
Application use cases.
"""

from .base_use_case import (
    UseCaseResult,
    BaseUseCase,
    QueryUseCase,
    CommandUseCase,
    AuthorizedUseCase,
)
from .gig_use_cases import ListOpenGigsUseCase, PostGigUseCase
from .performer_use_cases import GetPerformerProfileUseCase, ListMyApplicationsUseCase
from .stub_use_cases import (
    NotYetImplementedUseCase,
    ApplyToGigUseCase,
    ViewGigDetailUseCase,
    MessagesUseCase,
    EditProfileUseCase,
)

__all__ = [
    "UseCaseResult",
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",
    "AuthorizedUseCase",
    "ListOpenGigsUseCase",
    "PostGigUseCase",
    "GetPerformerProfileUseCase",
    "ListMyApplicationsUseCase",
    "NotYetImplementedUseCase",
    "ApplyToGigUseCase",
    "ViewGigDetailUseCase",
    "MessagesUseCase",
    "EditProfileUseCase",
]
