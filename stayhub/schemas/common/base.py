# --- File: stayhub/schemas/common/base.py ---
"""
Base schema classes with common fields and configurations.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

__all__ = [
    "Money",
    "BaseSchema",
    "TimestampMixin",
    "BaseRequestSchema",
    "BaseResponseSchema",
]


# Monetary amounts are kept as Decimal but sent to the backend as JSON numbers.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    Contract types ignore unknown fields so backend additions do not break
    decoding; missing or mistyped required fields still fail.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="ignore",
    )


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields."""

    created_at: Optional[datetime] = Field(default=None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Last update timestamp")


class BaseRequestSchema(BaseSchema):
    """Base schema for request bodies and query parameters."""

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict, dropping unset optional values"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class BaseResponseSchema(BaseSchema, TimestampMixin):
    """Base schema for API responses."""

    id: int = Field(..., description="Unique identifier")
