"""
Hotel listing schemas.

Covers the public listing/detail contracts, owner create/update bodies
and the list filters accepted by ``/hotels`` and ``/hotels/search``.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import Field, field_validator

from stayhub.schemas.common.base import BaseRequestSchema, BaseResponseSchema, BaseSchema, Money
from stayhub.schemas.common.enums import HotelStatus
from stayhub.schemas.common.pagination import PaginatedResponse

__all__ = [
    "HotelAddress",
    "HotelImage",
    "Facility",
    "HotelFacilityLink",
    "HotelRoomTypeSummary",
    "Hotel",
    "HotelList",
    "HotelFilters",
    "HotelAddressCreate",
    "HotelCreate",
    "HotelUpdate",
    "HotelStatistics",
]


class HotelAddress(BaseSchema):
    id: Optional[int] = None
    line1: str
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zipcode: Optional[str] = None
    country_id: Optional[int] = None
    state_id: Optional[int] = None
    city_id: Optional[int] = None

    @property
    def display(self) -> str:
        """Single-line address for listings."""
        parts = [self.line1, self.line2, self.city, self.state, self.country]
        return ", ".join(part for part in parts if part)


class HotelImage(BaseSchema):
    id: int
    image_url: str
    alt_text: Optional[str] = None
    is_primary: bool = False


class Facility(BaseSchema):
    id: int
    name: str
    description: Optional[str] = None


class HotelFacilityLink(BaseSchema):
    id: int
    facility: Facility


class HotelRoomTypeSummary(BaseSchema):
    id: int
    name: str
    price_per_night: Money = Field(..., ge=0)
    max_occupancy: int = Field(..., ge=1)
    description: Optional[str] = None
    status: Optional[str] = None


class Hotel(BaseResponseSchema):
    """Hotel as returned by listing and detail endpoints."""

    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    star_rating: Optional[int] = Field(None, ge=0, le=5)
    status: HotelStatus = HotelStatus.PENDING
    owner_id: Optional[int] = None
    hotel_address: Optional[HotelAddress] = None
    hotel_images: List[HotelImage] = Field(default_factory=list)
    hotel_facilities: List[HotelFacilityLink] = Field(default_factory=list)
    room_types: List[HotelRoomTypeSummary] = Field(default_factory=list)

    @property
    def primary_image(self) -> Optional[str]:
        for image in self.hotel_images:
            if image.is_primary:
                return image.image_url
        return self.hotel_images[0].image_url if self.hotel_images else None

    @property
    def lowest_price(self) -> Optional[Decimal]:
        """Cheapest nightly price across room types."""
        prices = [room.price_per_night for room in self.room_types]
        return min(prices) if prices else None


class HotelList(PaginatedResponse[Hotel]):
    """Paginated hotel list."""


class HotelFilters(BaseRequestSchema):
    search: Optional[str] = None
    city_id: Optional[int] = None
    state_id: Optional[int] = None
    country_id: Optional[int] = None
    star_rating: Optional[int] = Field(None, ge=1, le=5)
    status: Optional[HotelStatus] = None
    page: Optional[int] = Field(None, ge=1)
    limit: Optional[int] = Field(None, ge=1, le=100)


class HotelAddressCreate(BaseRequestSchema):
    line1: str = Field(..., min_length=1, max_length=255)
    line2: Optional[str] = Field(None, max_length=255)
    country_id: int
    state_id: int
    city_id: int
    zipcode: str = Field(..., min_length=3, max_length=12)


class HotelCreate(BaseRequestSchema):
    name: str = Field(..., min_length=2, max_length=150)
    description: str = Field(..., min_length=10, max_length=5000)
    star_rating: int = Field(..., ge=1, le=5)
    hotel_address: HotelAddressCreate

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Hotel name cannot be blank")
        return v


class HotelUpdate(BaseRequestSchema):
    name: Optional[str] = Field(None, min_length=2, max_length=150)
    description: Optional[str] = Field(None, max_length=5000)
    star_rating: Optional[int] = Field(None, ge=1, le=5)
    status: Optional[HotelStatus] = None


class HotelStatistics(BaseSchema):
    """Owner-facing per-hotel statistics from ``/hotels/my-status``."""

    hotel_id: Optional[int] = None
    total_bookings: int = 0
    total_revenue: Money = Decimal("0")
    average_rating: float = 0.0
    total_rooms: int = 0
    occupancy_rate: float = 0.0
