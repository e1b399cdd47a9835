"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypeVar, Generic, List
from dataclasses import dataclass

from hypecrew.domain.models.base import (
    DomainEvent,
    DomainException,
    ValidationError,
    BusinessRuleViolation,
    utcnow,
)
from hypecrew.domain.models.profile import Identity, UserRole

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    field: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_code: Optional[str] = None,
        field: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            field=field,
            metadata=metadata
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "UseCaseResult[T]":
        """Create error result from exception."""
        if isinstance(exc, ValidationError):
            return cls.error_result(exc.message, exc.code, field=exc.field)
        elif isinstance(exc, DomainException):
            return cls.error_result(exc.message, exc.code)
        else:
            return cls.error_result(str(exc) or type(exc).__name__, "UNKNOWN_ERROR")


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Provides common structure and error handling.
    """

    async def execute(self, request: T) -> UseCaseResult[R]:
        """
        Execute the use case, converting failures into an error result.
        """
        started = utcnow()

        try:
            await self._validate_request(request)
            result = await self._execute_business_logic(request)
        except DomainException as exc:
            logger.info(f"{type(self).__name__} failed: {exc.code}: {exc.message}")
            error_result = UseCaseResult.from_exception(exc)
        except Exception as exc:
            logger.exception(f"{type(self).__name__} failed unexpectedly")
            error_result = UseCaseResult.from_exception(exc)
        else:
            return UseCaseResult.success_result(
                result,
                metadata={"execution_time_seconds": (utcnow() - started).total_seconds()}
            )

        error_result.metadata = {
            "execution_time_seconds": (utcnow() - started).total_seconds(),
            "failed_at": utcnow().isoformat()
        }
        return error_result

    async def _validate_request(self, request: T) -> None:
        """
        Validate the request. Override in subclasses if needed.
        """
        pass

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """
    Base class for query use cases (read operations).
    """
    pass


class CommandUseCase(BaseUseCase[T, R]):
    """
    Base class for command use cases (write operations).
    Collects domain events and publishes them once the command succeeds.
    """

    def __init__(self):
        super().__init__()
        self.events: List[DomainEvent] = []

    async def _execute_business_logic(self, request: T) -> R:
        result = await self._execute_command_logic(request)
        await self._publish_events()
        return result

    @abstractmethod
    async def _execute_command_logic(self, request: T) -> R:
        """Execute the command logic. Must be implemented by subclasses."""
        pass

    async def _publish_events(self) -> None:
        """Publish collected domain events."""
        for event in self.events:
            logger.info(f"Domain event {event.event_name}: {event.to_dict()['data']}")
        self.events.clear()


class AuthorizedUseCase(BaseUseCase[T, R]):
    """
    Mixin for use cases that require a signed-in user.
    """

    def __init__(self):
        super().__init__()
        self.current_identity: Optional[Identity] = None
        self.current_role: Optional[UserRole] = None

    def set_current_user(self, identity: Optional[Identity], role: Optional[UserRole]) -> None:
        """Set the current user context."""
        self.current_identity = identity
        self.current_role = role

    @property
    def current_user_id(self) -> Optional[str]:
        return self.current_identity.id if self.current_identity else None

    async def _validate_request(self, request: T) -> None:
        """Validate request with authorization check."""
        await super()._validate_request(request)

        if self.current_identity is None:
            raise BusinessRuleViolation("You need to sign in first")

        await self._check_authorization(request)

    async def _check_authorization(self, request: T) -> None:
        """Check if the current user is authorized. Override in subclasses."""
        pass

    def _require_role(self, required_role: UserRole) -> None:
        """Check if user has required role."""
        if self.current_role is not required_role:
            raise BusinessRuleViolation(f"Only {required_role.value}s can do this")
