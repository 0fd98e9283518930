"""
Stay pricing and room availability search.

Totals here are display estimates (nightly price times nights); the
authoritative breakdown with taxes and fees comes from the preview
endpoint.
"""

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Union

from stayhub.api.rooms import RoomsApi
from stayhub.config.logging import get_logger
from stayhub.config.settings import settings
from stayhub.schemas.room import AvailableRoomType

logger = get_logger(__name__)

Number = Union[Decimal, int, float]

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "\u20AC",
    "GBP": "\u00A3",
    "JPY": "\u00A5",
    "INR": "\u20B9",
}


def nights_between(check_in: date, check_out: date) -> int:
    """Calendar-day difference between check-out and check-in."""
    return (check_out - check_in).days


def calculate_total_price(base_price: Number, check_in: date, check_out: date) -> Decimal:
    """
    Nightly price multiplied by the number of nights.

    Zero or negative night counts are passed through; callers validate the
    date range first.
    """
    return Decimal(str(base_price)) * nights_between(check_in, check_out)


def format_currency(amount: Number, currency: Optional[str] = None) -> str:
    """
    Format an amount for display, e.g. ``$1,234.50``.

    Unknown currency codes are used as the prefix.
    """
    code = currency or settings.CURRENCY
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")
    return f"{symbol}{value:,.2f}"


@dataclass(frozen=True)
class RoomOffer:
    """An available room type priced for a specific stay."""

    room_type: AvailableRoomType
    nights: int
    total_price: Decimal

    @property
    def is_available(self) -> bool:
        return self.room_type.is_available


class AvailabilityService:
    """Fetches available room types and prices them for the requested stay."""

    def __init__(self, rooms_api: RoomsApi):
        self.rooms_api = rooms_api

    async def search(
        self,
        hotel_id: int,
        check_in: date,
        check_out: date,
        guests: Optional[int] = None,
    ) -> List[RoomOffer]:
        response = await self.rooms_api.get_available_rooms(hotel_id, check_in, check_out, guests)
        nights = nights_between(check_in, check_out)

        offers = [
            RoomOffer(
                room_type=room_type,
                nights=nights,
                total_price=calculate_total_price(room_type.base_price, check_in, check_out),
            )
            for room_type in response.room_types
            if guests is None or room_type.max_guests >= guests
        ]

        logger.debug(
            "Availability loaded",
            extra={"hotel_id": hotel_id, "nights": nights, "offer_count": len(offers)},
        )
        return offers
