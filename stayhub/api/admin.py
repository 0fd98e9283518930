"""
Admin endpoints: hotel approval, bookings, payments, audit logs and exports.

Every call goes to the backend; a missing endpoint surfaces as an ApiError
rather than canned data.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from stayhub.api.client import BaseResource
from stayhub.schemas.admin import AuditLog, AuditLogFilters, DashboardStats, HotelStatusUpdate, PaymentStats
from stayhub.schemas.booking import Booking, BookingStatusUpdate
from stayhub.schemas.common.enums import BookingStatus, HotelStatus
from stayhub.schemas.hotel import Hotel
from stayhub.schemas.payment import PaymentTransaction, RefundRequest
from stayhub.schemas.user import User

DEFAULT_RECENT_AUDIT_LIMIT = 50


class AdminApi(BaseResource):

    # ==================== HOTEL APPROVAL ====================

    async def get_pending_hotels(self) -> List[Hotel]:
        return await self.client.get(
            "/hotels",
            params={"status": HotelStatus.PENDING.value},
            response_model=List[Hotel],
            fallback_message="Failed to fetch pending hotels",
        )

    async def approve_hotel(self, hotel_id: int) -> Hotel:
        return await self._set_hotel_status(hotel_id, HotelStatus.APPROVED, "Failed to approve hotel")

    async def reject_hotel(self, hotel_id: int) -> Hotel:
        return await self._set_hotel_status(hotel_id, HotelStatus.REJECTED, "Failed to reject hotel")

    async def _set_hotel_status(self, hotel_id: int, status: HotelStatus, fallback_message: str) -> Hotel:
        return await self.client.patch(
            f"/hotels/{hotel_id}/status",
            json=HotelStatusUpdate(status=status),
            response_model=Hotel,
            fallback_message=fallback_message,
        )

    # ==================== USERS ====================

    async def get_all_users(self) -> List[User]:
        return await self.client.get(
            "/users",
            response_model=List[User],
            fallback_message="Failed to fetch users",
        )

    async def set_user_active(self, user_id: int, active: bool) -> None:
        action = "activate" if active else "deactivate"
        await self.client.put(f"/users/{user_id}/{action}", fallback_message=f"Failed to {action} user")

    # ==================== BOOKINGS ====================

    async def get_all_bookings(self, **filters: Any) -> List[Booking]:
        return await self.client.get(
            "/bookings",
            params=filters,
            response_model=List[Booking],
            fallback_message="Failed to fetch bookings",
        )

    async def update_booking_status(self, booking_id: int, status: BookingStatus) -> Booking:
        return await self.client.put(
            f"/bookings/{booking_id}/status",
            json=BookingStatusUpdate(status=status),
            response_model=Booking,
            fallback_message="Failed to update booking status",
        )

    # ==================== PAYMENTS ====================

    async def get_all_payments(self, **filters: Any) -> List[PaymentTransaction]:
        return await self.client.get(
            "/payment-transactions/admin/all",
            params=filters,
            response_model=List[PaymentTransaction],
            fallback_message="Failed to fetch payments",
        )

    async def get_payment(self, transaction_id: int) -> PaymentTransaction:
        return await self.client.get(
            f"/payment-transactions/{transaction_id}",
            response_model=PaymentTransaction,
            fallback_message="Failed to fetch payment",
        )

    async def get_payment_stats(self) -> PaymentStats:
        return await self.client.get(
            "/payment-transactions/stats",
            response_model=PaymentStats,
            fallback_message="Failed to fetch payment statistics",
        )

    async def refund_payment(self, payment_id: int, reason: str) -> PaymentTransaction:
        return await self.client.post(
            f"/payments/{payment_id}/refund",
            json=RefundRequest(reason=reason),
            response_model=PaymentTransaction,
            fallback_message="Failed to process refund",
        )

    # ==================== AUDIT LOGS ====================

    async def get_audit_logs(self, filters: Optional[AuditLogFilters] = None) -> List[AuditLog]:
        return await self.client.get(
            "/audit-logs",
            params=filters,
            response_model=List[AuditLog],
            fallback_message="Failed to fetch audit logs",
        )

    async def get_audit_log(self, log_id: int) -> AuditLog:
        return await self.client.get(
            f"/audit-logs/{log_id}",
            response_model=AuditLog,
            fallback_message="Failed to fetch audit log",
        )

    async def get_audit_logs_by_user(self, user_id: int) -> List[AuditLog]:
        return await self.client.get(
            f"/audit-logs/user/{user_id}",
            response_model=List[AuditLog],
            fallback_message="Failed to fetch user audit logs",
        )

    async def get_audit_logs_by_action(self, action: str) -> List[AuditLog]:
        return await self.client.get(
            f"/audit-logs/action/{action}",
            response_model=List[AuditLog],
            fallback_message="Failed to fetch audit logs",
        )

    async def get_audit_logs_by_date_range(self, start_date: date, end_date: date) -> List[AuditLog]:
        return await self.client.get(
            "/audit-logs/date-range",
            params={"startDate": start_date.isoformat(), "endDate": end_date.isoformat()},
            response_model=List[AuditLog],
            fallback_message="Failed to fetch audit logs",
        )

    async def search_audit_logs(self, query: str) -> List[AuditLog]:
        return await self.client.get(
            "/audit-logs/search",
            params={"query": query},
            response_model=List[AuditLog],
            fallback_message="Failed to search audit logs",
        )

    async def get_recent_audit_logs(self, limit: int = DEFAULT_RECENT_AUDIT_LIMIT) -> List[AuditLog]:
        return await self.client.get(
            "/audit-logs/recent",
            params={"limit": limit},
            response_model=List[AuditLog],
            fallback_message="Failed to fetch recent audit logs",
        )

    async def get_audit_stats(self) -> Dict[str, Any]:
        return await self.client.get(
            "/audit-logs/stats",
            response_model=Dict[str, Any],
            fallback_message="Failed to fetch audit statistics",
        )

    # ==================== SYSTEM ====================

    async def get_system_stats(self) -> Dict[str, Any]:
        return await self.client.get(
            "/system-metrics/stats",
            response_model=Dict[str, Any],
            fallback_message="Failed to fetch system statistics",
        )

    async def get_dashboard_stats(self) -> DashboardStats:
        return await self.client.get(
            "/system-metrics/dashboard",
            response_model=DashboardStats,
            fallback_message="Failed to fetch dashboard statistics",
        )

    # ==================== EXPORTS ====================

    async def export_bookings(self, **filters: Any) -> bytes:
        return await self._export("/bookings/export", filters, "Failed to export bookings")

    async def export_payments(self, **filters: Any) -> bytes:
        return await self._export("/payment-transactions/export", filters, "Failed to export payments")

    async def export_audit_logs(self, **filters: Any) -> bytes:
        return await self._export("/audit-logs/export", filters, "Failed to export audit logs")

    async def _export(self, path: str, filters: Dict[str, Any], fallback_message: str) -> bytes:
        """Download a CSV export as raw bytes."""
        response = await self.client.send(
            "GET",
            path,
            params=filters,
            headers={"Accept": "text/csv"},
            fallback_message=fallback_message,
        )
        return response.content
