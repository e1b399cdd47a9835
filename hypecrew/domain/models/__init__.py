"""
Domain models for the HypeCrew marketplace.
This module exports all domain entities and exceptions.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainEvent,
    DomainException,
    ValidationError,
    BusinessRuleViolation,
    EntityNotFoundError,
    BackendServiceError,
    AuthenticationError,
    FeatureNotImplementedError,
)

# Domain entities
from .profile import (
    Identity,
    AuthSession,
    UserRole,
    PerformerType,
    Profile,
    PerformerProfile,
)

from .gig import (
    Gig,
    GigStatus,
    GigPostedEvent,
    GigStatusChangedEvent,
    ALLOWED_TRANSITIONS,
    HYPE_STYLES,
    EVENT_TYPES,
    clean_requirements,
)

from .application import (
    GigApplication,
    ApplicationStatus,
)

__all__ = [
    "BaseEntity",
    "DomainEvent",
    "DomainException",
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "BackendServiceError",
    "AuthenticationError",
    "FeatureNotImplementedError",
    "Identity",
    "AuthSession",
    "UserRole",
    "PerformerType",
    "Profile",
    "PerformerProfile",
    "Gig",
    "GigStatus",
    "GigPostedEvent",
    "GigStatusChangedEvent",
    "ALLOWED_TRANSITIONS",
    "HYPE_STYLES",
    "EVENT_TYPES",
    "clean_requirements",
    "GigApplication",
    "ApplicationStatus",
]
