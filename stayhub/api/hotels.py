"""Hotel listing and owner management endpoints."""

from typing import List, Optional

from stayhub.api.client import BaseResource
from stayhub.schemas.common.enums import HotelStatus
from stayhub.schemas.hotel import (
    Hotel,
    HotelCreate,
    HotelFilters,
    HotelList,
    HotelStatistics,
    HotelUpdate,
)
from stayhub.schemas.admin import HotelStatusUpdate


class HotelsApi(BaseResource):

    # Public endpoints

    async def list_hotels(self, filters: Optional[HotelFilters] = None) -> HotelList:
        return await self.client.get(
            "/hotels",
            params=filters,
            response_model=HotelList,
            fallback_message="Failed to fetch hotels",
        )

    async def search_hotels(self, query: str, filters: Optional[HotelFilters] = None) -> HotelList:
        params = (filters or HotelFilters()).model_copy(update={"search": query})
        return await self.client.get(
            "/hotels/search",
            params=params,
            response_model=HotelList,
            fallback_message="Failed to search hotels",
        )

    async def get_hotel(self, hotel_id: int) -> Hotel:
        return await self.client.get(
            f"/hotels/{hotel_id}",
            response_model=Hotel,
            fallback_message="Failed to fetch hotel",
        )

    # Owner endpoints

    async def get_my_hotels(self, filters: Optional[HotelFilters] = None) -> HotelList:
        return await self.client.get(
            "/hotels/my-hotels",
            params=filters,
            response_model=HotelList,
            fallback_message="Failed to fetch your hotels",
        )

    async def get_my_hotel_status(self) -> List[HotelStatistics]:
        return await self.client.get(
            "/hotels/my-status",
            response_model=List[HotelStatistics],
            fallback_message="Failed to fetch hotel statistics",
        )

    async def create_hotel(self, data: HotelCreate) -> Hotel:
        return await self.client.post(
            "/hotels",
            json=data,
            response_model=Hotel,
            fallback_message="Failed to create hotel",
        )

    async def update_hotel(self, hotel_id: int, data: HotelUpdate) -> Hotel:
        return await self.client.put(
            f"/hotels/{hotel_id}",
            json=data,
            response_model=Hotel,
            fallback_message="Failed to update hotel",
        )

    async def update_hotel_status(self, hotel_id: int, status: HotelStatus) -> Hotel:
        return await self.client.patch(
            f"/hotels/{hotel_id}/status",
            json=HotelStatusUpdate(status=status),
            response_model=Hotel,
            fallback_message="Failed to update hotel status",
        )

    async def delete_hotel(self, hotel_id: int) -> None:
        await self.client.delete(f"/hotels/{hotel_id}", fallback_message="Failed to delete hotel")
