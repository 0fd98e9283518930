"""Room type availability and hotel management endpoints."""

from datetime import date
from typing import List, Optional

from stayhub.api.client import BaseResource
from stayhub.schemas.common.enums import RoomStatus
from stayhub.schemas.room import (
    AmenityCreate,
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


class RoomsApi(BaseResource):

    async def get_available_rooms(
        self,
        hotel_id: int,
        check_in: date,
        check_out: date,
        guests: Optional[int] = None,
    ) -> RoomAvailabilityResponse:
        """Room types of a hotel with availability and nightly prices for a stay."""
        return await self.client.get(
            f"/room-types/hotel/{hotel_id}/available",
            params={
                "checkIn": check_in.isoformat(),
                "checkOut": check_out.isoformat(),
                "guests": guests,
            },
            response_model=RoomAvailabilityResponse,
            fallback_message="Failed to fetch available rooms",
        )

    async def get_room_types_by_hotel(self, hotel_id: int) -> List[RoomType]:
        return await self.client.get(
            f"/room-types/hotel/{hotel_id}",
            response_model=List[RoomType],
            fallback_message="Failed to fetch room types",
        )

    async def get_all_room_types(self) -> List[RoomType]:
        return await self.client.get(
            "/room-types",
            response_model=List[RoomType],
            fallback_message="Failed to fetch room types",
        )


class HotelManagementApi(BaseResource):
    """Owner-side management of rooms, pricing, amenities and facilities."""

    # ==================== DASHBOARD ====================

    async def get_hotel_stats(self, hotel_id: int) -> HotelStats:
        return await self.client.get(
            f"/hotels/{hotel_id}/dashboard/stats",
            response_model=HotelStats,
            fallback_message="Failed to fetch hotel statistics",
        )

    # ==================== ROOMS ====================

    async def get_hotel_rooms(self, hotel_id: int) -> List[Room]:
        return await self.client.get(
            f"/hotels/{hotel_id}/rooms",
            response_model=List[Room],
            fallback_message="Failed to fetch rooms",
        )

    async def create_room(self, data: RoomCreate) -> Room:
        return await self.client.post(
            "/rooms",
            json=data,
            response_model=Room,
            fallback_message="Failed to create room",
        )

    async def update_room(self, room_id: int, data: RoomUpdate) -> Room:
        return await self.client.put(
            f"/rooms/{room_id}",
            json=data,
            response_model=Room,
            fallback_message="Failed to update room",
        )

    async def delete_room(self, room_id: int) -> None:
        await self.client.delete(f"/rooms/{room_id}", fallback_message="Failed to delete room")

    async def update_room_status(self, room_id: int, status: RoomStatus) -> Room:
        return await self.client.patch(
            f"/rooms/{room_id}/status",
            json={"status": status.value},
            response_model=Room,
            fallback_message="Failed to update room status",
        )

    # ==================== PRICING ====================

    async def get_room_pricing(self, room_id: int) -> RoomPricing:
        return await self.client.get(
            f"/room-pricing/{room_id}",
            response_model=RoomPricing,
            fallback_message="Failed to fetch room pricing",
        )

    async def update_room_pricing(self, room_id: int, data: PricingUpdate) -> RoomPricing:
        return await self.client.put(
            f"/room-pricing/{room_id}",
            json=data,
            response_model=RoomPricing,
            fallback_message="Failed to update room pricing",
        )

    async def get_hotel_pricing(self, hotel_id: int) -> List[RoomPricing]:
        return await self.client.get(
            f"/hotels/{hotel_id}/pricing",
            response_model=List[RoomPricing],
            fallback_message="Failed to fetch hotel pricing",
        )

    # ==================== AMENITIES ====================

    async def get_hotel_amenities(self, hotel_id: int) -> List[HotelAmenity]:
        return await self.client.get(
            f"/hotel-amenities/hotel/{hotel_id}",
            response_model=List[HotelAmenity],
            fallback_message="Failed to fetch amenities",
        )

    async def create_amenity(self, data: AmenityCreate) -> HotelAmenity:
        return await self.client.post(
            "/hotel-amenities",
            json=data,
            response_model=HotelAmenity,
            fallback_message="Failed to create amenity",
        )

    async def update_amenity(self, amenity_id: int, data: AmenityCreate) -> HotelAmenity:
        return await self.client.put(
            f"/hotel-amenities/{amenity_id}",
            json=data,
            response_model=HotelAmenity,
            fallback_message="Failed to update amenity",
        )

    async def delete_amenity(self, amenity_id: int) -> None:
        await self.client.delete(f"/hotel-amenities/{amenity_id}", fallback_message="Failed to delete amenity")

    # ==================== FACILITIES ====================

    async def get_hotel_facilities(self, hotel_id: int) -> List[HotelFacility]:
        return await self.client.get(
            f"/hotel-facilities/hotel/{hotel_id}",
            response_model=List[HotelFacility],
            fallback_message="Failed to fetch facilities",
        )

    async def create_facility(self, data: FacilityCreate) -> HotelFacility:
        return await self.client.post(
            "/hotel-facilities",
            json=data,
            response_model=HotelFacility,
            fallback_message="Failed to create facility",
        )

    async def update_facility(self, facility_id: int, data: FacilityCreate) -> HotelFacility:
        return await self.client.put(
            f"/hotel-facilities/{facility_id}",
            json=data,
            response_model=HotelFacility,
            fallback_message="Failed to update facility",
        )

    async def delete_facility(self, facility_id: int) -> None:
        await self.client.delete(f"/hotel-facilities/{facility_id}", fallback_message="Failed to delete facility")

    async def toggle_facility(self, facility_id: int) -> HotelFacility:
        return await self.client.patch(
            f"/hotel-facilities/{facility_id}/toggle",
            response_model=HotelFacility,
            fallback_message="Failed to toggle facility",
        )
