"""
Service result patterns for flows that report failures instead of raising.

Booking, payment and wishlist flows return a ``ServiceResult`` so callers
can show the message to the user directly.
"""

from typing import TypeVar, Generic, Optional, Any, Dict, List
from dataclasses import dataclass
from enum import Enum
from datetime import datetime, timezone

from stayhub.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BaseAppException,
    ConflictError,
    NotAuthenticatedError,
    RateLimitError,
    ResourceNotFoundError,
    TransportError,
    ValidationError,
)


class ErrorCode(str, Enum):
    """Error codes of failed service operations."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"

    INVALID_STATE = "INVALID_STATE"
    CONFLICT = "CONFLICT"

    UNAUTHORIZED = "UNAUTHORIZED"
    INSUFFICIENT_PERMISSIONS = "INSUFFICIENT_PERMISSIONS"

    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"


_EXCEPTION_CODES = (
    (NotAuthenticatedError, ErrorCode.UNAUTHORIZED),
    (AuthenticationError, ErrorCode.UNAUTHORIZED),
    (AuthorizationError, ErrorCode.INSUFFICIENT_PERMISSIONS),
    (ResourceNotFoundError, ErrorCode.NOT_FOUND),
    (ConflictError, ErrorCode.CONFLICT),
    (RateLimitError, ErrorCode.RATE_LIMIT_EXCEEDED),
    (ValidationError, ErrorCode.VALIDATION_ERROR),
    (TransportError, ErrorCode.NETWORK_ERROR),
)


@dataclass
class ServiceError:
    """Represents a service operation error with context."""

    code: ErrorCode
    message: str
    details: Optional[Dict[str, Any]] = None
    field: Optional[str] = None
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
            "field": self.field,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }


TData = TypeVar("TData")


@dataclass
class ServiceResult(Generic[TData]):
    """
    Standardized service operation result with success/failure pattern.

    Attributes:
        is_success: Operation success indicator
        data: Result data (if successful)
        error: Error information (if failed)
        message: Human-readable status message
    """

    is_success: bool
    data: Optional[TData] = None
    error: Optional[ServiceError] = None
    message: Optional[str] = None

    @classmethod
    def success(
        cls,
        data: Optional[TData] = None,
        message: Optional[str] = None,
    ) -> "ServiceResult[TData]":
        """Create a successful result."""
        return cls(is_success=True, data=data, message=message)

    @classmethod
    def failure(cls, error: ServiceError) -> "ServiceResult[TData]":
        """Create a failed result."""
        return cls(is_success=False, error=error, message=error.message)

    @classmethod
    def fail(
        cls,
        code: ErrorCode,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        return cls.failure(ServiceError(code=code, message=message, field=field, details=details))

    @classmethod
    def from_exception(cls, exception: Exception, fallback_message: str) -> "ServiceResult[TData]":
        """
        Create a failed result from an exception.

        SDK exceptions keep their own (server-provided) message; anything
        else is reported with ``fallback_message``.
        """
        if isinstance(exception, BaseAppException):
            code = ErrorCode.EXTERNAL_SERVICE_ERROR
            for exc_type, mapped in _EXCEPTION_CODES:
                if isinstance(exception, exc_type):
                    code = mapped
                    break
            details = {"exception_type": type(exception).__name__}
            if exception.status_code is not None:
                details["status_code"] = exception.status_code
            return cls.fail(code, exception.message or fallback_message, details=details)

        return cls.fail(
            ErrorCode.INTERNAL_ERROR,
            fallback_message,
            details={"exception_type": type(exception).__name__},
        )

    @classmethod
    def validation_failure(
        cls,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        return cls.fail(ErrorCode.VALIDATION_ERROR, message, field=field, details=details)

    @classmethod
    def invalid_state(cls, message: str) -> "ServiceResult[TData]":
        return cls.fail(ErrorCode.INVALID_STATE, message)

    @classmethod
    def unauthorized(cls, message: str = "User not authenticated") -> "ServiceResult[TData]":
        return cls.fail(ErrorCode.UNAUTHORIZED, message)

    @property
    def errors(self) -> List[str]:
        """Validation messages carried in the error details, or the single message."""
        if self.is_success or self.error is None:
            return []
        details = self.error.details or {}
        messages = details.get("errors")
        if isinstance(messages, list) and messages:
            return [str(m) for m in messages]
        return [self.error.message]

    def unwrap(self) -> TData:
        """
        Unwrap the result data or raise exception if failed.

        Raises:
            ValueError: If the result is not successful
        """
        if not self.is_success:
            raise ValueError(f"Cannot unwrap failed result: {self.error.message if self.error else 'Unknown error'}")
        return self.data

    def unwrap_or(self, default: TData) -> TData:
        return self.data if self.is_success else default

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"is_success": self.is_success, "message": self.message}
        if self.is_success:
            result["data"] = self.data
        else:
            result["error"] = self.error.to_dict() if self.error else None
        return result

    def __bool__(self) -> bool:
        return self.is_success

    def __repr__(self) -> str:
        status = "Success" if self.is_success else "Failure"
        if self.message:
            return f"ServiceResult({status}: {self.message})"
        return f"ServiceResult({status})"


__all__ = [
    "ErrorCode",
    "ServiceError",
    "ServiceResult",
]
