"""
Booking schemas with price breakdown contracts.

The breakdown returned by the preview endpoint is rendered as-is; the
client never recomputes taxes or fees.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import EmailStr, Field, field_validator

from stayhub.schemas.common.base import BaseRequestSchema, BaseResponseSchema, BaseSchema, Money
from stayhub.schemas.common.enums import BookingStatus, PaymentStatus

__all__ = [
    "GuestDetails",
    "PriceCalculationRequest",
    "PriceLine",
    "PriceBreakdown",
    "PreviewHotel",
    "PreviewRoomType",
    "BookingPolicies",
    "BookingPreview",
    "BookingRequest",
    "Booking",
    "BookingStatusUpdate",
]


class GuestDetails(BaseRequestSchema):
    """Lead guest details collected in the booking flow."""

    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    email: EmailStr
    phone: str = Field(..., max_length=32)
    special_requests: Optional[str] = Field(None, max_length=1000)

    @field_validator("phone", mode="before")
    @classmethod
    def coerce_phone(cls, v: Any) -> Any:
        """Phone numbers entered as digits arrive as integers."""
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class PriceCalculationRequest(BaseRequestSchema):
    hotel_id: int
    room_type_id: int
    check_in: date
    check_out: date
    guests: int = Field(1, ge=1)


class PriceLine(BaseSchema):
    """One itemized tax or fee."""

    name: str
    amount: Money
    percentage: Optional[float] = None


class PriceBreakdown(BaseSchema):
    """Server-computed price breakdown."""

    base_price: Money
    total_nights: int
    subtotal: Money
    taxes: List[PriceLine] = Field(default_factory=list)
    service_fees: List[PriceLine] = Field(default_factory=list)
    total_taxes: Money = Decimal("0")
    total_fees: Money = Decimal("0")
    total_amount: Money


class PreviewHotel(BaseSchema):
    id: int
    name: str
    address: Optional[Any] = None


class PreviewRoomType(BaseSchema):
    id: int
    name: str
    description: Optional[str] = None
    base_price: Money
    max_guests: int


class BookingPolicies(BaseSchema):
    cancellation_policy: Optional[str] = None
    checkin_time: Optional[str] = None
    checkout_time: Optional[str] = None


class BookingPreview(BaseSchema):
    """Body of ``/bookings/preview``."""

    hotel: PreviewHotel
    room_type: PreviewRoomType
    check_in: date
    check_out: date
    guests: int
    price_breakdown: PriceBreakdown
    policies: Optional[BookingPolicies] = None


class BookingRequest(BaseRequestSchema):
    hotel_id: int
    room_type_id: int
    check_in: date
    check_out: date
    guests: int = Field(..., ge=1)
    guest_details: GuestDetails
    idempotency_key: Optional[str] = None

    @field_validator("guests")
    @classmethod
    def validate_guests(cls, v: int) -> int:
        if v > 20:
            raise ValueError("A single booking cannot exceed 20 guests")
        return v


class Booking(BaseResponseSchema):
    """Booking as returned by booking endpoints."""

    hotel_id: int
    room_type_id: Optional[int] = None
    check_in: date
    check_out: date
    guests: int
    total_amount: Money
    status: BookingStatus = BookingStatus.PENDING
    payment_status: Optional[PaymentStatus] = None
    booking_reference: Optional[str] = None
    guest_details: Optional[Dict[str, Any]] = None

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    @property
    def is_cancellable(self) -> bool:
        return self.status in (BookingStatus.PENDING, BookingStatus.CONFIRMED)


class BookingStatusUpdate(BaseRequestSchema):
    status: BookingStatus
