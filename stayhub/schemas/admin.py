"""
Admin management schemas: audit logs and aggregate statistics.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import Field

from stayhub.schemas.common.base import BaseRequestSchema, BaseSchema, Money
from stayhub.schemas.common.enums import HotelStatus

__all__ = [
    "AuditLog",
    "AuditLogFilters",
    "PaymentStats",
    "DashboardStats",
    "HotelStatusUpdate",
]


class AuditLog(BaseSchema):
    id: int
    user_id: Optional[int] = None
    action: str
    resource: Optional[str] = None
    resource_id: Optional[str] = None
    status: Optional[str] = None
    ip_address: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    created_at: datetime


class AuditLogFilters(BaseRequestSchema):
    user_id: Optional[int] = None
    action: Optional[str] = None
    resource: Optional[str] = None
    page: Optional[int] = Field(None, ge=1)
    limit: Optional[int] = Field(None, ge=1, le=500)


class PaymentStats(BaseSchema):
    total_transactions: int = 0
    completed: int = 0
    failed: int = 0
    pending: int = 0
    refunded: int = 0
    total_revenue: Money = Decimal("0")


class DashboardStats(BaseSchema):
    total_users: int = 0
    total_hotels: int = 0
    total_bookings: int = 0
    pending_hotels: int = 0
    total_revenue: Money = Decimal("0")


class HotelStatusUpdate(BaseRequestSchema):
    status: HotelStatus
