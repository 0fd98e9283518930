"""Common schema building blocks."""

from stayhub.schemas.common.base import BaseRequestSchema, BaseResponseSchema, BaseSchema, Money, TimestampMixin
from stayhub.schemas.common.enums import (
    BookingStatus,
    HotelStatus,
    PaymentMethod,
    PaymentStatus,
    RoomStatus,
    UserRole,
)
from stayhub.schemas.common.pagination import PaginatedResponse, PaginationMeta

__all__ = [
    "BaseSchema",
    "Money",
    "BaseRequestSchema",
    "BaseResponseSchema",
    "TimestampMixin",
    "BookingStatus",
    "HotelStatus",
    "PaymentMethod",
    "PaymentStatus",
    "RoomStatus",
    "UserRole",
    "PaginatedResponse",
    "PaginationMeta",
]
