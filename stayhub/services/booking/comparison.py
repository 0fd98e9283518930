"""
Side-by-side room comparison.

Holds up to ``max_rooms`` room types and flags, per compared feature, which
rooms offer the best value.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from stayhub.config.logging import get_logger
from stayhub.config.settings import settings
from stayhub.schemas.room import AvailableRoomType

logger = get_logger(__name__)

DEFAULT_ROOM_SIZE = 25
DEFAULT_GUEST_RATING = 4.5
DEFAULT_CANCELLATION_POLICY = "Free Cancellation"

COMPARISON_FEATURES = (
    "price",
    "size",
    "guests",
    "bed_type",
    "bathroom",
    "wifi",
    "parking",
    "cancellation",
    "rating",
    "breakfast",
    "view",
)


@dataclass(frozen=True)
class FeatureValue:
    value: Any
    highlight: bool


class RoomComparison:
    """Selection of room types being compared"""

    def __init__(self, max_rooms: Optional[int] = None):
        self.max_rooms = max_rooms if max_rooms is not None else settings.MAX_COMPARISON_ROOMS
        self._rooms: List[AvailableRoomType] = []

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    @property
    def rooms(self) -> List[AvailableRoomType]:
        return list(self._rooms)

    @property
    def is_comparing(self) -> bool:
        return len(self._rooms) > 1

    @property
    def max_reached(self) -> bool:
        return len(self._rooms) >= self.max_rooms

    def contains(self, room_id: int) -> bool:
        return any(room.id == room_id for room in self._rooms)

    def add(self, room: AvailableRoomType) -> bool:
        """
        Add a room to the comparison.

        Returns:
            False (and logs a warning) when the room is already compared or
            the comparison is full
        """
        if self.contains(room.id):
            logger.warning("Room already in comparison", extra={"room_type_id": room.id})
            return False
        if self.max_reached:
            logger.warning(
                "Comparison limit reached",
                extra={"room_type_id": room.id, "max_rooms": self.max_rooms},
            )
            return False
        self._rooms.append(room)
        return True

    def remove(self, room_id: int) -> bool:
        before = len(self._rooms)
        self._rooms = [room for room in self._rooms if room.id != room_id]
        return len(self._rooms) != before

    def toggle(self, room: AvailableRoomType) -> bool:
        """Remove the room if compared, add it otherwise. Returns whether it is now compared."""
        if self.contains(room.id):
            self.remove(room.id)
            return False
        return self.add(room)

    def clear(self) -> None:
        self._rooms = []

    # -------------------------------------------------------------------------
    # Highlights
    # -------------------------------------------------------------------------

    def highlights(self) -> Dict[int, Dict[str, FeatureValue]]:
        """Per room id, the value and best-value flag of every compared feature."""
        if not self._rooms:
            return {}

        lowest_price = min(room.base_price for room in self._rooms)
        largest_size = max(room.room_size or DEFAULT_ROOM_SIZE for room in self._rooms)
        most_guests = max(room.max_guests for room in self._rooms)
        best_rating = max(room.guest_rating or DEFAULT_GUEST_RATING for room in self._rooms)

        result: Dict[int, Dict[str, FeatureValue]] = {}
        for room in self._rooms:
            size = room.room_size or DEFAULT_ROOM_SIZE
            rating = room.guest_rating or DEFAULT_GUEST_RATING
            result[room.id] = {
                "price": FeatureValue(room.base_price, room.base_price <= lowest_price),
                "size": FeatureValue(size, size >= largest_size),
                "guests": FeatureValue(room.max_guests, room.max_guests >= most_guests),
                "bed_type": FeatureValue(room.bed_type, room.bed_type == "King Bed"),
                "bathroom": FeatureValue(room.private_bathroom, bool(room.private_bathroom)),
                "wifi": FeatureValue(room.free_wifi, bool(room.free_wifi)),
                "parking": FeatureValue(room.parking, bool(room.parking)),
                "cancellation": FeatureValue(
                    room.cancellation_policy or DEFAULT_CANCELLATION_POLICY,
                    "Free" in (room.cancellation_policy or ""),
                ),
                "rating": FeatureValue(rating, rating >= best_rating),
                "breakfast": FeatureValue(room.breakfast_included, bool(room.breakfast_included)),
                "view": FeatureValue(room.room_view, "Ocean" in (room.room_view or "")),
            }
        return result
