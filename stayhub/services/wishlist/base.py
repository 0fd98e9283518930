"""Wishlist service interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from stayhub.schemas.hotel import Hotel
from stayhub.schemas.wishlist import HotelSummary, WishlistItem
from stayhub.services.base import ServiceResult

HotelInfo = Union[Hotel, HotelSummary]

MSG_ALREADY_IN_WISHLIST = "Hotel already in wishlist"
MSG_NOT_IN_WISHLIST = "Hotel not found in wishlist"
MSG_ADDED = "Hotel added to wishlist"
MSG_REMOVED = "Hotel removed from wishlist"


class WishlistService(ABC):
    """Saved hotels of the logged-in user"""

    @abstractmethod
    async def list(self) -> ServiceResult[List[WishlistItem]]:
        ...

    @abstractmethod
    async def add(self, hotel_id: int, hotel: Optional[HotelInfo] = None) -> ServiceResult[WishlistItem]:
        """Save a hotel; ``hotel`` supplies the displayed fields where the backend does not"""

    @abstractmethod
    async def remove(self, hotel_id: int) -> ServiceResult[Optional[WishlistItem]]:
        ...

    async def contains(self, hotel_id: int) -> bool:
        result = await self.list()
        if not result:
            return False
        return any(item.hotel_id == hotel_id for item in result.data)

    async def toggle(self, hotel_id: int, hotel: Optional[HotelInfo] = None) -> ServiceResult:
        if await self.contains(hotel_id):
            return await self.remove(hotel_id)
        return await self.add(hotel_id, hotel)
