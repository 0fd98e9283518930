# --- File: stayhub/schemas/common/pagination.py ---
"""
Pagination schemas for page-based list responses.
"""

from __future__ import annotations

from typing import Generic, List, TypeVar

from pydantic import Field, computed_field

from stayhub.schemas.common.base import BaseSchema

T = TypeVar("T")

__all__ = [
    "PaginationMeta",
    "PaginatedResponse",
]


class PaginationMeta(BaseSchema):
    """Pagination metadata as returned by the backend."""

    page: int = Field(..., ge=1, description="Current page (1-indexed)")
    limit: int = Field(..., ge=1, description="Items per page")
    total: int = Field(..., ge=0, description="Total number of items")
    total_pages: int = Field(..., ge=0, alias="totalPages", description="Total number of pages")

    @computed_field  # type: ignore[misc]
    @property
    def has_next(self) -> bool:
        """Whether another page follows."""
        return self.page < self.total_pages


class PaginatedResponse(BaseSchema, Generic[T]):
    """Page of items plus pagination metadata."""

    data: List[T] = Field(default_factory=list, description="Items on this page")
    pagination: PaginationMeta = Field(..., description="Pagination metadata")
