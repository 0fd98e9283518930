"""Booking endpoints: price calculation, preview, creation and cancellation."""

from typing import List

from stayhub.api.client import BaseResource
from stayhub.core.constants import BOOKING_KEY_PREFIX
from stayhub.core.security import generate_idempotency_key
from stayhub.schemas.booking import (
    Booking,
    BookingPreview,
    BookingRequest,
    PriceBreakdown,
    PriceCalculationRequest,
)


class BookingsApi(BaseResource):

    async def calculate_price(self, request: PriceCalculationRequest) -> PriceBreakdown:
        return await self.client.post(
            "/price-calculation/calculate",
            json=request,
            response_model=PriceBreakdown,
            fallback_message="Failed to calculate price",
        )

    async def get_booking_preview(self, request: PriceCalculationRequest) -> BookingPreview:
        return await self.client.post(
            "/bookings/preview",
            json=request,
            response_model=BookingPreview,
            fallback_message="Failed to get booking preview",
        )

    async def create_booking(self, request: BookingRequest) -> Booking:
        """
        Create a booking.

        A ``booking_`` idempotency key is generated when the request carries
        none; the key travels in the request body.
        """
        if not request.idempotency_key:
            request = request.model_copy(
                update={"idempotency_key": generate_idempotency_key(BOOKING_KEY_PREFIX)}
            )
        return await self.client.post(
            "/bookings",
            json=request,
            response_model=Booking,
            fallback_message="Failed to create booking",
        )

    async def get_my_bookings(self) -> List[Booking]:
        return await self.client.get(
            "/bookings/my-bookings",
            response_model=List[Booking],
            fallback_message="Failed to fetch bookings",
        )

    async def get_booking(self, booking_id: int) -> Booking:
        return await self.client.get(
            f"/bookings/{booking_id}",
            response_model=Booking,
            fallback_message="Failed to fetch booking",
        )

    async def cancel_booking(self, booking_id: int) -> Booking:
        return await self.client.put(
            f"/bookings/{booking_id}/cancel",
            json={},
            response_model=Booking,
            fallback_message="Failed to cancel booking",
        )
