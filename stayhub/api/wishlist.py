"""Server-side wishlist endpoints."""

from typing import List

from stayhub.api.client import BaseResource
from stayhub.schemas.wishlist import WishlistAdd, WishlistItem


class WishlistApi(BaseResource):

    async def list_items(self) -> List[WishlistItem]:
        return await self.client.get(
            "/wishlist",
            response_model=List[WishlistItem],
            fallback_message="Failed to fetch wishlist",
        )

    async def add_item(self, hotel_id: int) -> WishlistItem:
        return await self.client.post(
            "/wishlist",
            json=WishlistAdd(hotel_id=hotel_id),
            response_model=WishlistItem,
            fallback_message="Failed to add to wishlist",
        )

    async def remove_item(self, hotel_id: int) -> None:
        await self.client.delete(f"/wishlist/{hotel_id}", fallback_message="Failed to remove from wishlist")
