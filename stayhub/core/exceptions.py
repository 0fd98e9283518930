"""
Custom Exceptions for the StayHub client SDK

This module defines the exception classes raised by the API client layer
and the booking/payment services, so callers can tell an expired session
apart from a validation failure or an unreachable backend.
"""

from typing import Any, Dict, List, Optional
from enum import Enum

import httpx


class ErrorCode(str, Enum):
    """Standard error codes for the SDK"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    OPERATION_FAILED = "OPERATION_FAILED"

    # Authentication & Authorization
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"

    # Business logic errors
    BOOKING_CONFLICT = "BOOKING_CONFLICT"
    PAYMENT_FAILED = "PAYMENT_FAILED"

    # Transport / contract errors
    API_ERROR = "API_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    DECODE_ERROR = "DECODE_ERROR"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Configuration errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class BaseAppException(Exception):
    """
    Base exception class for all SDK exceptions.

    Provides consistent error handling with structured error information.
    """

    is_retryable: bool = False

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "status_code": self.status_code,
                "type": self.__class__.__name__
            }
        }

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# API Exceptions
# ========================================

class ApiError(BaseAppException):
    """Raised when the backend answers with a non-2xx status"""

    def __init__(
        self,
        message: str = "Request failed",
        status_code: Optional[int] = None,
        payload: Any = None,
        error_code: ErrorCode = ErrorCode.API_ERROR,
    ):
        details = {"payload": payload} if payload is not None else {}
        super().__init__(message, error_code, details, status_code)
        self.payload = payload


class AuthenticationError(ApiError):
    """Raised on 401 responses; the stored session is no longer valid"""

    def __init__(self, message: str = "Authentication failed", payload: Any = None):
        super().__init__(message, 401, payload, ErrorCode.AUTHENTICATION_FAILED)


class AuthorizationError(ApiError):
    """Raised on 403 responses"""

    def __init__(self, message: str = "Insufficient permissions", payload: Any = None):
        super().__init__(message, 403, payload, ErrorCode.AUTHORIZATION_FAILED)


class ResourceNotFoundError(ApiError):
    """Raised on 404 responses"""

    def __init__(self, message: str = "Resource not found", payload: Any = None):
        super().__init__(message, 404, payload, ErrorCode.RESOURCE_NOT_FOUND)


class ConflictError(ApiError):
    """Raised on 409 responses (duplicate booking, payment already processed)"""

    def __init__(self, message: str = "Request conflicts with current state", payload: Any = None):
        super().__init__(message, 409, payload, ErrorCode.BOOKING_CONFLICT)


class RateLimitError(ApiError):
    """Raised on 429 responses"""

    is_retryable = True

    def __init__(self, message: str = "Too many requests", payload: Any = None):
        super().__init__(message, 429, payload, ErrorCode.RATE_LIMIT_EXCEEDED)


class ValidationError(BaseAppException):
    """Raised when request data fails client-side or server-side validation"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
        status_code: Optional[int] = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, error_code, details, status_code)
        self.field_errors = field_errors or {}


class TransportError(BaseAppException):
    """Raised when the backend cannot be reached or the request timed out"""

    is_retryable = True

    def __init__(self, message: str = "Network error occurred", error_code: ErrorCode = ErrorCode.TRANSPORT_ERROR):
        super().__init__(message, error_code)


class ResponseDecodeError(BaseAppException):
    """Raised when a response body does not match the endpoint's contract type"""

    def __init__(self, message: str, endpoint: Optional[str] = None, errors: Optional[List[Any]] = None):
        details = {"endpoint": endpoint, "errors": errors or []}
        super().__init__(message, ErrorCode.DECODE_ERROR, details)


class NotAuthenticatedError(BaseAppException):
    """Raised when an operation needs a logged-in session and none exists"""

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message, ErrorCode.NOT_AUTHENTICATED, status_code=401)


class ConfigurationError(BaseAppException):
    """Raised when a required setting is missing or invalid"""

    def __init__(self, message: str = "Invalid configuration", setting: Optional[str] = None):
        details = {"setting": setting} if setting else {}
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


# ========================================
# Response mapping
# ========================================

STATUS_EXCEPTIONS = {
    401: AuthenticationError,
    403: AuthorizationError,
    404: ResourceNotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def extract_error_message(payload: Any) -> Optional[str]:
    """Pull the server-provided message out of an error body"""
    if isinstance(payload, dict):
        for key in ("error", "message", "detail"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
            if isinstance(value, dict) and isinstance(value.get("message"), str):
                return value["message"]
    if isinstance(payload, str) and payload.strip():
        return payload.strip()
    return None


def exception_for_response(response: httpx.Response, fallback_message: str) -> BaseAppException:
    """
    Build the exception matching a non-2xx response.

    Args:
        response: The failed HTTP response
        fallback_message: Message used when the server provides none

    Returns:
        An ApiError subclass (or ValidationError for 400/422)
    """
    try:
        payload = response.json()
    except ValueError:
        payload = response.text or None

    message = extract_error_message(payload) or fallback_message
    status = response.status_code

    if status in (400, 422):
        field_errors = payload.get("errors") if isinstance(payload, dict) else None
        if not isinstance(field_errors, dict):
            field_errors = None
        return ValidationError(message, field_errors=field_errors, status_code=status)

    exc_class = STATUS_EXCEPTIONS.get(status)
    if exc_class is not None:
        return exc_class(message, payload=payload)
    return ApiError(message, status_code=status, payload=payload)


def raise_for_response(response: httpx.Response, fallback_message: str) -> None:
    """Raise the mapped exception when ``response`` is not a 2xx"""
    if response.is_success:
        return
    raise exception_for_response(response, fallback_message)


__all__ = [
    "ErrorCode",
    "BaseAppException",
    "ApiError",
    "AuthenticationError",
    "AuthorizationError",
    "ResourceNotFoundError",
    "ConflictError",
    "RateLimitError",
    "ValidationError",
    "TransportError",
    "ResponseDecodeError",
    "NotAuthenticatedError",
    "ConfigurationError",
    "extract_error_message",
    "exception_for_response",
    "raise_for_response",
]
