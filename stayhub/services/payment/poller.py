"""
Payment status polling.

Fetches the status once, then again every ``interval`` seconds while the
payment is still pending. Cancelling the task running ``run()`` stops the
loop between fetches.
"""

import asyncio
from typing import Awaitable, Callable, Optional

from stayhub.api.payments import PaymentsApi
from stayhub.config.logging import get_logger
from stayhub.config.settings import settings
from stayhub.core.exceptions import BaseAppException
from stayhub.schemas.payment import PaymentStatusInfo

logger = get_logger(__name__)

Sleep = Callable[[float], Awaitable[None]]
StatusCallback = Callable[[PaymentStatusInfo], None]


class PaymentStatusPoller:
    """
    Polls ``/booking-payments/booking/{id}`` until the payment settles.

    Args:
        payments_api: Payment endpoints
        booking_id: Booking whose payment is watched
        interval: Seconds between fetches while pending
        sleep: Awaitable sleep, replaced by a fake in tests
        max_attempts: Upper bound on fetches (None polls until terminal)
        on_update: Called with every fetched status
    """

    def __init__(
        self,
        payments_api: PaymentsApi,
        booking_id: int,
        interval: Optional[float] = None,
        sleep: Sleep = asyncio.sleep,
        max_attempts: Optional[int] = None,
        on_update: Optional[StatusCallback] = None,
    ):
        self.payments_api = payments_api
        self.booking_id = booking_id
        self.interval = interval if interval is not None else settings.PAYMENT_POLL_INTERVAL_SECONDS
        self.sleep = sleep
        self.max_attempts = max_attempts if max_attempts is not None else settings.PAYMENT_POLL_MAX_ATTEMPTS
        self.on_update = on_update
        self.attempts = 0
        self.last_status: Optional[PaymentStatusInfo] = None
        self.last_error: Optional[BaseAppException] = None

    async def fetch_once(self) -> Optional[PaymentStatusInfo]:
        """
        Fetch the current status.

        SDK errors are logged and kept in ``last_error``; the previous status
        is kept so the loop keeps waiting.
        """
        self.attempts += 1
        try:
            info = await self.payments_api.get_payment_status(self.booking_id)
        except BaseAppException as e:
            self.last_error = e
            logger.warning(
                "Failed to check payment status",
                extra={"booking_id": self.booking_id, "attempt": self.attempts, "reason": e.message},
            )
            return self.last_status

        self.last_error = None
        self.last_status = info
        if self.on_update is not None:
            self.on_update(info)
        return info

    def _should_continue(self) -> bool:
        if self.max_attempts is not None and self.attempts >= self.max_attempts:
            return False
        if self.last_status is None:
            return False
        return not self.last_status.is_terminal

    async def run(self) -> Optional[PaymentStatusInfo]:
        """
        Poll until a terminal status, the attempt limit or task cancellation.

        Returns:
            The last fetched status (None if none could be fetched)
        """
        await self.fetch_once()
        try:
            while self._should_continue():
                await self.sleep(self.interval)
                await self.fetch_once()
        except asyncio.CancelledError:
            logger.debug("Payment status polling cancelled", extra={"booking_id": self.booking_id})
            raise

        logger.info(
            "Payment status polling finished",
            extra={
                "booking_id": self.booking_id,
                "attempts": self.attempts,
                "payment_status": self.last_status.status.value if self.last_status else None,
            },
        )
        return self.last_status
