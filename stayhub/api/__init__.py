"""REST resource wrappers over the booking backend."""

from stayhub.api.addresses import AddressesApi
from stayhub.api.admin import AdminApi
from stayhub.api.auth import AuthApi, UsersApi
from stayhub.api.bookings import BookingsApi
from stayhub.api.client import ApiClient, BaseResource
from stayhub.api.hotels import HotelsApi
from stayhub.api.payments import PaymentsApi
from stayhub.api.rooms import HotelManagementApi, RoomsApi
from stayhub.api.wishlist import WishlistApi

__all__ = [
    "ApiClient",
    "BaseResource",
    "AuthApi",
    "UsersApi",
    "HotelsApi",
    "RoomsApi",
    "HotelManagementApi",
    "BookingsApi",
    "PaymentsApi",
    "AddressesApi",
    "AdminApi",
    "WishlistApi",
]
