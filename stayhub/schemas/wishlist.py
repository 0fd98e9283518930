"""
Wishlist schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stayhub.schemas.common.base import BaseRequestSchema, BaseSchema, Money

__all__ = [
    "HotelSummary",
    "WishlistItem",
    "WishlistAdd",
]


class HotelSummary(BaseSchema):
    """Denormalized hotel fields stored with a wishlist entry."""

    name: str
    image: Optional[str] = None
    price: Optional[Money] = Field(None, ge=0)
    rating: Optional[float] = Field(None, ge=0, le=5)
    location: Optional[str] = None


class WishlistItem(BaseSchema):
    id: int
    user_id: int
    hotel_id: int
    hotel_name: str
    hotel_image: Optional[str] = None
    hotel_price: Optional[Money] = None
    hotel_rating: Optional[float] = None
    hotel_location: Optional[str] = None
    created_at: datetime


class WishlistAdd(BaseRequestSchema):
    hotel_id: int
