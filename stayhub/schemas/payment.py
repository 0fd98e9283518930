"""
Payment schemas.

A payment transaction is created once per booking attempt and carries a
client-generated idempotency key; retries send the same key again.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from stayhub.schemas.common.base import BaseRequestSchema, BaseResponseSchema, BaseSchema, Money
from stayhub.schemas.common.enums import PaymentMethod, PaymentStatus

__all__ = [
    "PaymentDetails",
    "PaymentRequest",
    "PaymentTransaction",
    "PaymentStatusInfo",
    "RefundRequest",
]


class PaymentDetails(BaseRequestSchema):
    """Card or bank account details, depending on the payment method."""

    card_number: Optional[str] = None
    card_holder: Optional[str] = None
    expiry_date: Optional[str] = None
    cvv: Optional[str] = None
    account_number: Optional[str] = None
    account_holder: Optional[str] = None
    routing_number: Optional[str] = None

    def __repr__(self) -> str:
        return "PaymentDetails(<redacted>)"


class PaymentRequest(BaseRequestSchema):
    booking_id: int
    amount: Money = Field(..., gt=0)
    payment_method: PaymentMethod
    payment_details: PaymentDetails = Field(default_factory=PaymentDetails)
    idempotency_key: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def validate_details(self) -> "PaymentRequest":
        """Card payments need a card number, bank payments an account number."""
        details = self.payment_details
        if self.payment_method is PaymentMethod.CARD and not details.card_number:
            raise ValueError("Card payments require card details")
        if self.payment_method is PaymentMethod.BANK and not details.account_number:
            raise ValueError("Bank payments require account details")
        return self


class PaymentTransaction(BaseResponseSchema):
    """Body of ``/payments`` create and retry calls."""

    booking_id: int
    amount: Money
    status: PaymentStatus
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None


class PaymentStatusInfo(BaseSchema):
    """Body of ``/booking-payments/booking/{id}``."""

    status: PaymentStatus
    transaction_id: Optional[str] = None
    error_message: Optional[str] = None
    processed_at: Optional[datetime] = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal


class RefundRequest(BaseRequestSchema):
    reason: str = Field(..., min_length=3, max_length=500)
