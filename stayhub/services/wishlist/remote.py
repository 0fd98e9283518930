"""Wishlist backed by the ``/wishlist`` endpoints."""

from typing import List, Optional

from stayhub.api.wishlist import WishlistApi
from stayhub.config.logging import get_logger
from stayhub.schemas.wishlist import WishlistItem
from stayhub.services.base import ServiceResult
from stayhub.services.wishlist.base import MSG_ADDED, MSG_REMOVED, HotelInfo, WishlistService

logger = get_logger(__name__)


class HttpWishlistService(WishlistService):

    def __init__(self, api: WishlistApi):
        self.api = api

    async def list(self) -> ServiceResult[List[WishlistItem]]:
        try:
            return ServiceResult.success(await self.api.list_items())
        except Exception as e:
            logger.error("Failed to fetch wishlist", extra={"error_type": type(e).__name__})
            return ServiceResult.from_exception(e, "Failed to fetch wishlist")

    async def add(self, hotel_id: int, hotel: Optional[HotelInfo] = None) -> ServiceResult[WishlistItem]:
        try:
            item = await self.api.add_item(hotel_id)
        except Exception as e:
            logger.error("Failed to add to wishlist", extra={"hotel_id": hotel_id, "error_type": type(e).__name__})
            return ServiceResult.from_exception(e, "Failed to add to wishlist")
        return ServiceResult.success(item, message=MSG_ADDED)

    async def remove(self, hotel_id: int) -> ServiceResult[Optional[WishlistItem]]:
        try:
            await self.api.remove_item(hotel_id)
        except Exception as e:
            logger.error(
                "Failed to remove from wishlist",
                extra={"hotel_id": hotel_id, "error_type": type(e).__name__},
            )
            return ServiceResult.from_exception(e, "Failed to remove from wishlist")
        return ServiceResult.success(None, message=MSG_REMOVED)
