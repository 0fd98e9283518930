"""Payment endpoints. Creation and retry carry an ``Idempotency-Key`` header."""

from stayhub.api.client import BaseResource
from stayhub.core.constants import HEADER_IDEMPOTENCY_KEY
from stayhub.schemas.payment import PaymentRequest, PaymentStatusInfo, PaymentTransaction


class PaymentsApi(BaseResource):

    async def create_payment(self, request: PaymentRequest) -> PaymentTransaction:
        return await self.client.post(
            "/payments",
            json=request,
            headers={HEADER_IDEMPOTENCY_KEY: request.idempotency_key},
            response_model=PaymentTransaction,
            fallback_message="Payment failed",
        )

    async def get_payment_status(self, booking_id: int) -> PaymentStatusInfo:
        return await self.client.get(
            f"/booking-payments/booking/{booking_id}",
            response_model=PaymentStatusInfo,
            fallback_message="Failed to get payment status",
        )

    async def retry_payment(self, booking_id: int, idempotency_key: str) -> PaymentTransaction:
        return await self.client.post(
            f"/payments/{booking_id}/retry",
            json={},
            headers={HEADER_IDEMPOTENCY_KEY: idempotency_key},
            response_model=PaymentTransaction,
            fallback_message="Payment retry failed",
        )

    async def cancel_payment(self, booking_id: int) -> None:
        await self.client.post(
            f"/payments/{booking_id}/cancel",
            fallback_message="Failed to cancel payment",
        )
