"""
Payment submission for one booking.

The idempotency key is generated on the first submission and sent again
verbatim on every retry, so the backend never charges twice for the same
attempt.
"""

import re
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from stayhub.api.payments import PaymentsApi
from stayhub.config.logging import get_logger
from stayhub.core.constants import PAYMENT_KEY_PREFIX
from stayhub.core.security import generate_idempotency_key
from stayhub.core.validation import PAYMENT_BANK_RULES, PAYMENT_CARD_RULES, validate_form
from stayhub.schemas.common.enums import PaymentMethod, PaymentStatus
from stayhub.schemas.payment import PaymentDetails, PaymentRequest, PaymentStatusInfo, PaymentTransaction
from stayhub.services.base import ServiceResult

logger = get_logger(__name__)

MASKED_FIELDS = ("card_number", "account_number")
OMITTED_FIELDS = ("cvv",)


def _last_four(value: Any) -> str:
    return re.sub(r"[\s-]", "", str(value))[-4:]


def _payment_details(details: Mapping[str, Any], rules: Mapping[str, Any]) -> PaymentDetails:
    """
    Build the details sent to the backend from a validated form.

    Card and account numbers are reduced to their last four digits and the
    CVV never leaves the client.
    """
    values: Dict[str, str] = {}
    for key in rules:
        value = details.get(key)
        if value is None or key in OMITTED_FIELDS:
            continue
        values[key] = _last_four(value) if key in MASKED_FIELDS else str(value)
    return PaymentDetails(**values)


class PaymentSession:
    """
    Submits, retries and cancels the payment of a single booking.

    ``status`` only changes in response to the server: it is None until
    the first successful call.
    """

    def __init__(self, payments_api: PaymentsApi, booking_id: int, amount: Decimal):
        self.payments_api = payments_api
        self.booking_id = booking_id
        self.amount = amount
        self.idempotency_key: Optional[str] = None
        self.status: Optional[PaymentStatus] = None
        self.transaction_id: Optional[str] = None

    def _ensure_key(self) -> str:
        if self.idempotency_key is None:
            self.idempotency_key = generate_idempotency_key(PAYMENT_KEY_PREFIX)
        return self.idempotency_key

    def _record(self, status: PaymentStatus, transaction_id: Optional[str]) -> None:
        self.status = status
        if transaction_id:
            self.transaction_id = transaction_id

    async def submit(
        self,
        method: PaymentMethod,
        details: Mapping[str, Any],
    ) -> ServiceResult[PaymentTransaction]:
        """
        Validate the payment form and create the payment.

        Args:
            method: Card or bank transfer
            details: Raw form fields for the chosen method

        Returns:
            The created transaction, or a failure with the form or server message
        """
        rules = PAYMENT_CARD_RULES if method is PaymentMethod.CARD else PAYMENT_BANK_RULES
        field_errors = validate_form(details, rules)
        if field_errors:
            return ServiceResult.validation_failure(
                "Please correct the payment details",
                details={"errors": list(field_errors.values()), "fields": field_errors},
            )

        try:
            request = PaymentRequest(
                booking_id=self.booking_id,
                amount=self.amount,
                payment_method=method,
                payment_details=_payment_details(details, rules),
                idempotency_key=self._ensure_key(),
            )
        except PydanticValidationError as e:
            return ServiceResult.validation_failure(
                "Invalid payment request",
                details={"errors": [err["msg"] for err in e.errors(include_url=False)]},
            )

        try:
            transaction = await self.payments_api.create_payment(request)
        except Exception as e:
            logger.error(
                "Payment submission failed",
                extra={"booking_id": self.booking_id, "error_type": type(e).__name__},
            )
            return ServiceResult.from_exception(e, "Payment failed. Please try again.")

        self._record(transaction.status, transaction.transaction_id)
        logger.info(
            "Payment submitted",
            extra={"booking_id": self.booking_id, "payment_status": transaction.status.value},
        )
        return ServiceResult.success(transaction)

    async def retry(self) -> ServiceResult[PaymentTransaction]:
        """Retry with the key of the original submission."""
        if self.idempotency_key is None:
            return ServiceResult.invalid_state("No payment has been submitted for this booking")

        try:
            transaction = await self.payments_api.retry_payment(self.booking_id, self.idempotency_key)
        except Exception as e:
            logger.error(
                "Payment retry failed",
                extra={"booking_id": self.booking_id, "error_type": type(e).__name__},
            )
            return ServiceResult.from_exception(e, "Payment retry failed")

        self._record(transaction.status, transaction.transaction_id)
        logger.info("Payment retry initiated", extra={"booking_id": self.booking_id})
        return ServiceResult.success(transaction, message="Payment retry initiated. Please wait...")

    async def cancel(self) -> ServiceResult[None]:
        try:
            await self.payments_api.cancel_payment(self.booking_id)
        except Exception as e:
            logger.error(
                "Payment cancellation failed",
                extra={"booking_id": self.booking_id, "error_type": type(e).__name__},
            )
            return ServiceResult.from_exception(e, "Failed to cancel payment")

        self.status = PaymentStatus.CANCELLED
        logger.info("Payment cancelled", extra={"booking_id": self.booking_id})
        return ServiceResult.success(message="Payment cancelled")

    def apply_status(self, info: PaymentStatusInfo) -> None:
        """Record a status fetched by the poller"""
        self._record(info.status, info.transaction_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "booking_id": self.booking_id,
            "amount": str(self.amount),
            "status": self.status.value if self.status else None,
            "transaction_id": self.transaction_id,
        }
