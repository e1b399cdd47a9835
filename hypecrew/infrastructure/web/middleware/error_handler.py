"""
Global error handler middleware for the FastAPI application.
Catches and formats all exceptions consistently.
"""

import logging
import traceback
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from hypecrew.application.dto.base_dto import ErrorResponseDTO
from hypecrew.application.use_cases.base_use_case import UseCaseResult
from hypecrew.config import settings
from hypecrew.domain.models.base import (
    AuthenticationError,
    BackendServiceError,
    BusinessRuleViolation,
    DomainException,
    EntityNotFoundError,
    FeatureNotImplementedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Error codes carried by UseCaseResult, mapped to HTTP statuses
STATUS_BY_ERROR_CODE: Dict[str, int] = {
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "BUSINESS_RULE_VIOLATION": status.HTTP_403_FORBIDDEN,
    "AUTHENTICATION_FAILED": status.HTTP_401_UNAUTHORIZED,
    "BACKEND_ERROR": status.HTTP_502_BAD_GATEWAY,
    "BACKEND_NOT_CONFIGURED": status.HTTP_503_SERVICE_UNAVAILABLE,
    "NOT_IMPLEMENTED": status.HTTP_501_NOT_IMPLEMENTED,
}

ERROR_TITLES: Dict[int, str] = {
    status.HTTP_401_UNAUTHORIZED: "Unauthorized",
    status.HTTP_403_FORBIDDEN: "Forbidden",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_422_UNPROCESSABLE_ENTITY: "Validation Error",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
    status.HTTP_501_NOT_IMPLEMENTED: "Coming Soon",
    status.HTTP_502_BAD_GATEWAY: "Backend Error",
    status.HTTP_503_SERVICE_UNAVAILABLE: "Backend Unavailable",
    status.HTTP_504_GATEWAY_TIMEOUT: "Request Timeout",
}


def status_for_error_code(code: Optional[str]) -> int:
    return STATUS_BY_ERROR_CODE.get(code or "", status.HTTP_500_INTERNAL_SERVER_ERROR)


def status_for_exception(exc: DomainException) -> int:
    """HTTP status for a domain exception, by type first and code second."""
    if isinstance(exc, ValidationError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, FeatureNotImplementedError):
        return status.HTTP_501_NOT_IMPLEMENTED
    if isinstance(exc, AuthenticationError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, BusinessRuleViolation):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, BackendServiceError):
        return STATUS_BY_ERROR_CODE.get(exc.code, status.HTTP_502_BAD_GATEWAY)
    return status_for_error_code(exc.code)


def error_body(status_code: int, message: str, field: Optional[str] = None, **details: Any) -> Dict[str, Any]:
    return ErrorResponseDTO(
        error=ERROR_TITLES.get(status_code, "Error"),
        message=message,
        field=field,
        details=details or None,
    ).model_dump(exclude_none=True)


def http_exception_for(exc: DomainException) -> HTTPException:
    """Translate a domain exception caught in a router."""
    status_code = status_for_exception(exc)
    return HTTPException(
        status_code=status_code,
        detail=error_body(status_code, exc.message, getattr(exc, "field", None)),
    )


def raise_for_result(result: UseCaseResult, **details: Any) -> None:
    """
    Raise an HTTPException for a failed use case result.
    Extra keyword arguments land in the error's `details`.
    """
    if result.success:
        return
    status_code = status_for_error_code(result.error_code)
    raise HTTPException(
        status_code=status_code,
        detail=error_body(status_code, result.error or "Request failed", result.field, **details),
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Handle different types of exceptions and return appropriate responses.
        """
        if isinstance(exc, DomainException):
            logger.warning(
                f"{type(exc).__name__} escaped {request.method} {request.url.path}: {exc.message}"
            )
        else:
            logger.error(
                f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
                exc_info=True,
                extra={
                    "request_path": request.url.path,
                    "request_method": request.method,
                    "client_host": request.client.host if request.client else None
                }
            )

        status_code, content = self.format_error_response(exc)

        # In development, add more debug information
        if settings.debug:
            content["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(status_code=status_code, content={"detail": content})

    def format_error_response(self, exc: Exception):
        """
        Format exception into a status code and a consistent error body.
        """
        if isinstance(exc, DomainException):
            status_code = status_for_exception(exc)
            return status_code, error_body(status_code, exc.message, getattr(exc, "field", None))

        if isinstance(exc, TimeoutError):
            status_code = status.HTTP_504_GATEWAY_TIMEOUT
            return status_code, error_body(status_code, "The request took too long to process")

        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return status_code, error_body(status_code, "An unexpected error occurred")
