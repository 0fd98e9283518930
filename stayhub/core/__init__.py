"""Core SDK modules."""

from .exceptions import BaseAppException, ApiError, ErrorCode
from .security import generate_idempotency_key

__all__ = ["BaseAppException", "ApiError", "ErrorCode", "generate_idempotency_key"]
