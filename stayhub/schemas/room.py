"""
Room type, availability and hotel management schemas.

``RoomType`` and ``AvailableRoomType`` describe what guests book; ``Room``,
``RoomPricing``, amenities and facilities are managed by the hotel owner.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import Field, model_validator

from stayhub.schemas.common.base import BaseRequestSchema, BaseResponseSchema, BaseSchema, Money
from stayhub.schemas.common.enums import RoomStatus

__all__ = [
    "RoomType",
    "AvailableRoomType",
    "RoomAvailabilityResponse",
    "Room",
    "RoomCreate",
    "RoomUpdate",
    "RoomPricing",
    "PricingUpdate",
    "HotelAmenity",
    "AmenityCreate",
    "HotelFacility",
    "FacilityCreate",
    "HotelStats",
]


# ==================== ROOM TYPES & AVAILABILITY ====================


class RoomType(BaseResponseSchema):
    """Bookable room category of a hotel."""

    hotel_id: int
    name: str
    description: Optional[str] = None
    base_price: Money = Field(..., ge=0, description="Nightly price")
    max_guests: int = Field(..., ge=1)
    status: Optional[str] = None


class AvailableRoomType(RoomType):
    """Room type with availability counts and comparison attributes."""

    available_rooms: int = Field(..., ge=0)
    total_rooms: int = Field(..., ge=0)
    amenities: List[str] = Field(default_factory=list)
    room_size: Optional[float] = Field(None, ge=0, description="Square metres")
    bed_type: Optional[str] = None
    private_bathroom: Optional[bool] = None
    free_wifi: Optional[bool] = None
    parking: Optional[bool] = None
    cancellation_policy: Optional[str] = None
    guest_rating: Optional[float] = Field(None, ge=0, le=5)
    breakfast_included: Optional[bool] = None
    room_view: Optional[str] = None
    reviews_count: Optional[int] = None
    room_type: Optional[str] = None

    @property
    def is_available(self) -> bool:
        return self.available_rooms > 0


class RoomAvailabilityResponse(BaseSchema):
    """Body of ``/room-types/hotel/{id}/available``."""

    hotel_id: int
    check_in: date
    check_out: date
    room_types: List[AvailableRoomType] = Field(default_factory=list)


# ==================== PHYSICAL ROOMS ====================


class Room(BaseResponseSchema):
    hotel_id: int
    room_number: str
    room_type: str
    capacity: int = Field(..., ge=1)
    base_price: Money = Field(..., ge=0)
    status: RoomStatus = RoomStatus.AVAILABLE
    amenities: List[str] = Field(default_factory=list)


class RoomCreate(BaseRequestSchema):
    hotel_id: int
    room_number: str = Field(..., min_length=1, max_length=20)
    room_type: str = Field(..., min_length=1, max_length=80)
    capacity: int = Field(..., ge=1, le=20)
    base_price: Money = Field(..., ge=0)
    amenities: List[str] = Field(default_factory=list)


class RoomUpdate(BaseRequestSchema):
    room_number: Optional[str] = Field(None, min_length=1, max_length=20)
    room_type: Optional[str] = Field(None, min_length=1, max_length=80)
    capacity: Optional[int] = Field(None, ge=1, le=20)
    base_price: Optional[Money] = Field(None, ge=0)
    status: Optional[RoomStatus] = None
    amenities: Optional[List[str]] = None


# ==================== PRICING ====================


class RoomPricing(BaseResponseSchema):
    room_id: int
    weekday_price: Money = Field(..., ge=0)
    weekend_price: Money = Field(..., ge=0)
    seasonal_price: Optional[Money] = Field(None, ge=0)
    seasonal_start: Optional[date] = None
    seasonal_end: Optional[date] = None


class PricingUpdate(BaseRequestSchema):
    weekday_price: Money = Field(..., ge=0)
    weekend_price: Money = Field(..., ge=0)
    seasonal_price: Optional[Money] = Field(None, ge=0)
    seasonal_start: Optional[date] = None
    seasonal_end: Optional[date] = None

    @model_validator(mode="after")
    def validate_season(self) -> "PricingUpdate":
        """A seasonal price needs a complete, ordered date window."""
        if self.seasonal_price is not None:
            if self.seasonal_start is None or self.seasonal_end is None:
                raise ValueError("Seasonal price requires seasonal_start and seasonal_end")
        if self.seasonal_start and self.seasonal_end and self.seasonal_end < self.seasonal_start:
            raise ValueError("seasonal_end must not be before seasonal_start")
        return self


# ==================== AMENITIES & FACILITIES ====================


class HotelAmenity(BaseResponseSchema):
    hotel_id: int
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    category: Optional[str] = None


class AmenityCreate(BaseRequestSchema):
    hotel_id: int
    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""
    icon: str = ""
    category: str = "general"


class HotelFacility(BaseResponseSchema):
    hotel_id: int
    name: str
    description: Optional[str] = None
    operating_hours: Optional[str] = None
    availability: bool = True


class FacilityCreate(BaseRequestSchema):
    hotel_id: int
    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""
    operating_hours: str = ""
    availability: bool = True


class HotelStats(BaseSchema):
    """Owner dashboard figures from ``/hotels/{id}/dashboard/stats``."""

    total_bookings: int = 0
    total_revenue: Money = Decimal("0")
    occupancy_rate: float = 0.0
    average_rating: float = 0.0
    active_rooms: int = 0
    total_rooms: int = 0
    monthly_revenue: List[Money] = Field(default_factory=list)
    recent_bookings: List[Dict[str, Any]] = Field(default_factory=list)
