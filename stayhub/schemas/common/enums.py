# --- File: stayhub/schemas/common/enums.py ---
"""
All enumeration types exchanged with the booking backend.
"""

from enum import Enum

__all__ = [
    "UserRole",
    "HotelStatus",
    "RoomStatus",
    "BookingStatus",
    "PaymentStatus",
    "PaymentMethod",
]


class UserRole(str, Enum):
    """User role enumeration."""

    USER = "user"
    HOTEL_OWNER = "hotel_owner"
    ADMIN = "admin"


class HotelStatus(str, Enum):
    """Hotel listing status."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class RoomStatus(str, Enum):
    """Physical room status."""

    AVAILABLE = "available"
    BLOCKED = "blocked"
    MAINTENANCE = "maintenance"


class BookingStatus(str, Enum):
    """Booking lifecycle status."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentStatus(str, Enum):
    """Payment transaction status."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        """Terminal statuses end polling."""
        return self is not PaymentStatus.PENDING


class PaymentMethod(str, Enum):
    """Supported payment methods."""

    CARD = "card"
    BANK = "bank"
