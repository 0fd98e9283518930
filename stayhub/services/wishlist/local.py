"""
Wishlist kept in local storage under ``wishlist_<user_id>``.

Used when the backend has no wishlist endpoints. Entries are denormalized
from the hotel passed to ``add``.
"""

import json
import time
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from stayhub.auth.session import SessionManager
from stayhub.config.logging import get_logger
from stayhub.core.constants import WISHLIST_KEY_PREFIX
from stayhub.schemas.hotel import Hotel
from stayhub.schemas.wishlist import HotelSummary, WishlistItem
from stayhub.services.base import ErrorCode, ServiceResult
from stayhub.services.wishlist.base import (
    MSG_ADDED,
    MSG_ALREADY_IN_WISHLIST,
    MSG_NOT_IN_WISHLIST,
    MSG_REMOVED,
    HotelInfo,
    WishlistService,
)
from stayhub.storage.base import KeyValueStorage

logger = get_logger(__name__)


def _summary(hotel_id: int, hotel: Optional[HotelInfo]) -> HotelSummary:
    if isinstance(hotel, HotelSummary):
        return hotel
    if isinstance(hotel, Hotel):
        rating = float(hotel.star_rating) if hotel.star_rating is not None else None
        return HotelSummary(
            name=hotel.name,
            image=hotel.primary_image,
            price=hotel.lowest_price,
            rating=rating,
            location=hotel.hotel_address.display if hotel.hotel_address else None,
        )
    return HotelSummary(name=f"Hotel {hotel_id}")


class LocalWishlistService(WishlistService):

    def __init__(self, storage: KeyValueStorage, session: SessionManager):
        self.storage = storage
        self.session = session

    def _storage_key(self) -> Optional[str]:
        if not self.session.token:
            return None
        user_id = self.session.user_id
        if user_id is None:
            return None
        return f"{WISHLIST_KEY_PREFIX}{user_id}"

    def _load(self, key: str) -> List[WishlistItem]:
        raw = self.storage.get_json(key, default=[])
        return [WishlistItem.model_validate(entry) for entry in raw]

    def _save(self, key: str, items: List[WishlistItem]) -> None:
        self.storage.set_json(key, [item.model_dump(mode="json") for item in items])

    async def list(self) -> ServiceResult[List[WishlistItem]]:
        key = self._storage_key()
        if key is None:
            return ServiceResult.unauthorized()
        try:
            return ServiceResult.success(self._load(key))
        except (json.JSONDecodeError, PydanticValidationError, TypeError) as e:
            logger.error("Stored wishlist is unreadable", extra={"storage_key": key, "error_type": type(e).__name__})
            return ServiceResult.fail(ErrorCode.INTERNAL_ERROR, "Failed to fetch wishlist")

    async def add(self, hotel_id: int, hotel: Optional[HotelInfo] = None) -> ServiceResult[WishlistItem]:
        key = self._storage_key()
        if key is None:
            return ServiceResult.unauthorized()

        current = await self.list()
        if not current:
            return ServiceResult.fail(ErrorCode.INTERNAL_ERROR, "Failed to add to wishlist")
        items = current.data

        if any(item.hotel_id == hotel_id for item in items):
            return ServiceResult.fail(ErrorCode.ALREADY_EXISTS, MSG_ALREADY_IN_WISHLIST)

        summary = _summary(hotel_id, hotel)
        item = WishlistItem(
            id=int(time.time() * 1000),
            user_id=self.session.user_id,
            hotel_id=hotel_id,
            hotel_name=summary.name,
            hotel_image=summary.image,
            hotel_price=summary.price,
            hotel_rating=summary.rating,
            hotel_location=summary.location,
            created_at=datetime.now(timezone.utc),
        )
        items.append(item)
        self._save(key, items)
        logger.info("Hotel added to wishlist", extra={"hotel_id": hotel_id})
        return ServiceResult.success(item, message=MSG_ADDED)

    async def remove(self, hotel_id: int) -> ServiceResult[Optional[WishlistItem]]:
        key = self._storage_key()
        if key is None:
            return ServiceResult.unauthorized()

        current = await self.list()
        if not current:
            return ServiceResult.fail(ErrorCode.INTERNAL_ERROR, "Failed to remove from wishlist")
        items = current.data

        removed = next((item for item in items if item.hotel_id == hotel_id), None)
        if removed is None:
            return ServiceResult.fail(ErrorCode.NOT_FOUND, MSG_NOT_IN_WISHLIST)

        self._save(key, [item for item in items if item.hotel_id != hotel_id])
        logger.info("Hotel removed from wishlist", extra={"hotel_id": hotel_id})
        return ServiceResult.success(removed, message=MSG_REMOVED)
