"""
Contract types for every backend endpoint the SDK calls.
"""

from stayhub.schemas.address import Address, AddressCreate, AddressUpdate
from stayhub.schemas.admin import AuditLog, AuditLogFilters, DashboardStats, HotelStatusUpdate, PaymentStats
from stayhub.schemas.booking import (
    Booking,
    BookingPreview,
    BookingRequest,
    BookingStatusUpdate,
    GuestDetails,
    PriceBreakdown,
    PriceCalculationRequest,
    PriceLine,
)
from stayhub.schemas.common import (
    BookingStatus,
    HotelStatus,
    PaymentMethod,
    PaymentStatus,
    RoomStatus,
    UserRole,
)
from stayhub.schemas.hotel import Hotel, HotelCreate, HotelFilters, HotelList, HotelStatistics, HotelUpdate
from stayhub.schemas.payment import (
    PaymentDetails,
    PaymentRequest,
    PaymentStatusInfo,
    PaymentTransaction,
    RefundRequest,
)
from stayhub.schemas.room import (
    AmenityCreate,
    AvailableRoomType,
    FacilityCreate,
    HotelAmenity,
    HotelFacility,
    HotelStats,
    PricingUpdate,
    Room,
    RoomAvailabilityResponse,
    RoomCreate,
    RoomPricing,
    RoomType,
    RoomUpdate,
)
from stayhub.schemas.user import AuthResponse, LoginCredentials, PasswordChange, ProfileUpdate, RegisterData, User
from stayhub.schemas.wishlist import HotelSummary, WishlistAdd, WishlistItem

__all__ = [
    "Address", "AddressCreate", "AddressUpdate",
    "AuditLog", "AuditLogFilters", "DashboardStats", "HotelStatusUpdate", "PaymentStats",
    "Booking", "BookingPreview", "BookingRequest", "BookingStatusUpdate", "GuestDetails",
    "PriceBreakdown", "PriceCalculationRequest", "PriceLine",
    "BookingStatus", "HotelStatus", "PaymentMethod", "PaymentStatus", "RoomStatus", "UserRole",
    "Hotel", "HotelCreate", "HotelFilters", "HotelList", "HotelStatistics", "HotelUpdate",
    "PaymentDetails", "PaymentRequest", "PaymentStatusInfo", "PaymentTransaction", "RefundRequest",
    "AmenityCreate", "AvailableRoomType", "FacilityCreate", "HotelAmenity", "HotelFacility", "HotelStats",
    "PricingUpdate", "Room", "RoomAvailabilityResponse", "RoomCreate", "RoomPricing", "RoomType", "RoomUpdate",
    "AuthResponse", "LoginCredentials", "PasswordChange", "ProfileUpdate", "RegisterData", "User",
    "HotelSummary", "WishlistAdd", "WishlistItem",
]
