"""
StayHub client facade.

Wires settings, persisted storage, the login session and every resource
wrapper around one shared ``ApiClient``.
"""

from typing import Optional

import httpx

from stayhub.api import (
    AddressesApi,
    AdminApi,
    ApiClient,
    AuthApi,
    BookingsApi,
    HotelManagementApi,
    HotelsApi,
    PaymentsApi,
    RoomsApi,
    UsersApi,
    WishlistApi,
)
from stayhub.auth.session import SessionManager
from stayhub.config.logging import get_logger, setup_logging
from stayhub.config.settings import Settings, get_settings
from stayhub.services.booking import AvailabilityService, BookingCancellation, BookingFlow, RoomComparison
from stayhub.services.wishlist import HttpWishlistService, LocalWishlistService, WishlistService
from stayhub.storage.base import KeyValueStorage
from stayhub.storage.memory import InMemoryStorage
from stayhub.storage.sql import SqlStorage

logger = get_logger(__name__)


class StayHubClient:
    """
    Entry point of the SDK.

    Example:
        async with StayHubClient.from_settings() as client:
            await client.session.login(credentials)
            hotels = await client.hotels.list_hotels()
    """

    def __init__(
        self,
        app_settings: Optional[Settings] = None,
        storage: Optional[KeyValueStorage] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        use_server_wishlist: bool = False,
    ):
        self.settings = app_settings or get_settings()
        self.storage = storage if storage is not None else InMemoryStorage()
        self.session = SessionManager(self.storage)

        self.http = ApiClient(
            base_url=self.settings.API_BASE_URL,
            token_provider=self.session.token_provider,
            on_unauthorized=self.session.handle_unauthorized,
            timeout=self.settings.API_TIMEOUT_SECONDS,
            transport=transport,
        )

        self.auth = AuthApi(self.http)
        self.users = UsersApi(self.http)
        self.hotels = HotelsApi(self.http)
        self.rooms = RoomsApi(self.http)
        self.hotel_management = HotelManagementApi(self.http)
        self.bookings = BookingsApi(self.http)
        self.payments = PaymentsApi(self.http)
        self.addresses = AddressesApi(self.http)
        self.admin = AdminApi(self.http)
        self.wishlist_api = WishlistApi(self.http)

        self.session.auth_api = self.auth
        self.availability = AvailabilityService(self.rooms)

        if use_server_wishlist:
            self.wishlist: WishlistService = HttpWishlistService(self.wishlist_api)
        else:
            self.wishlist = LocalWishlistService(self.storage, self.session)

    @classmethod
    def from_settings(
        cls,
        app_settings: Optional[Settings] = None,
        configure_logging: bool = True,
        persist: bool = True,
        **kwargs,
    ) -> "StayHubClient":
        """
        Build a client from settings, with SQL-backed storage and a hydrated session.

        Args:
            app_settings: Settings to use (defaults to the cached environment settings)
            configure_logging: Run ``setup_logging`` first
            persist: Store the session in ``STORAGE_URL`` instead of memory
        """
        app_settings = app_settings or get_settings()
        if configure_logging:
            setup_logging(app_settings)

        storage: KeyValueStorage
        if persist:
            storage = SqlStorage(url=app_settings.STORAGE_URL, echo=app_settings.STORAGE_ECHO)
        else:
            storage = InMemoryStorage()

        client = cls(app_settings=app_settings, storage=storage, **kwargs)
        client.session.hydrate()
        logger.info(
            "StayHub client ready",
            extra={"api_base_url": app_settings.API_BASE_URL, "authenticated": client.session.is_authenticated},
        )
        return client

    # -------------------------------------------------------------------------
    # Flows
    # -------------------------------------------------------------------------

    def booking_flow(self, **kwargs) -> BookingFlow:
        return BookingFlow(self, self.session, **kwargs)

    def booking_cancellation(self) -> BookingCancellation:
        return BookingCancellation(self)

    def room_comparison(self) -> RoomComparison:
        return RoomComparison(max_rooms=self.settings.MAX_COMPARISON_ROOMS)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def aclose(self) -> None:
        await self.http.aclose()
        if isinstance(self.storage, SqlStorage):
            self.storage.close()

    async def __aenter__(self) -> "StayHubClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
