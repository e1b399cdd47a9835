from .error_handler import (
    ErrorHandlerMiddleware,
    http_exception_for,
    raise_for_result,
    status_for_error_code,
)

__all__ = [
    "ErrorHandlerMiddleware",
    "http_exception_for",
    "raise_for_result",
    "status_for_error_code",
]
