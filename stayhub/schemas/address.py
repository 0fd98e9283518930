"""
User address schemas.
"""

from typing import Optional

from pydantic import Field

from stayhub.schemas.common.base import BaseRequestSchema, BaseResponseSchema

__all__ = [
    "Address",
    "AddressCreate",
    "AddressUpdate",
]


class Address(BaseResponseSchema):
    user_id: Optional[int] = None
    line1: str
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zipcode: Optional[str] = None
    country_id: Optional[int] = None
    state_id: Optional[int] = None
    city_id: Optional[int] = None
    is_default: bool = Field(False, alias="isDefault")


class AddressCreate(BaseRequestSchema):
    line1: str = Field(..., min_length=1, max_length=255)
    line2: Optional[str] = Field(None, max_length=255)
    country_id: int
    state_id: int
    city_id: int
    zipcode: str = Field(..., min_length=3, max_length=12)
    is_default: Optional[bool] = Field(None, alias="isDefault")


class AddressUpdate(BaseRequestSchema):
    line1: Optional[str] = Field(None, min_length=1, max_length=255)
    line2: Optional[str] = Field(None, max_length=255)
    country_id: Optional[int] = None
    state_id: Optional[int] = None
    city_id: Optional[int] = None
    zipcode: Optional[str] = Field(None, min_length=3, max_length=12)
    is_default: Optional[bool] = Field(None, alias="isDefault")
