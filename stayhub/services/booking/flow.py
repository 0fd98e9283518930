"""
Booking flow: room selection, guest details, payment and result.

Each step reports failures as ``ServiceResult`` failures carrying the server
message (or a fallback string) and leaves the flow on the current step.
"""

from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from stayhub.auth.session import SessionManager
from stayhub.config.logging import get_logger
from stayhub.core.constants import BOOKING_KEY_PREFIX
from stayhub.core.security import generate_idempotency_key
from stayhub.core.validation import validate_guest_details, validate_stay_dates
from stayhub.schemas.booking import Booking, BookingPreview, BookingRequest, GuestDetails, PriceCalculationRequest
from stayhub.schemas.common.enums import BookingStatus, PaymentMethod
from stayhub.schemas.payment import PaymentTransaction
from stayhub.schemas.room import RoomType
from stayhub.services.base import ServiceResult
from stayhub.services.booking.pricing import calculate_total_price, nights_between
from stayhub.services.payment import PaymentSession, PaymentStatusPoller

if TYPE_CHECKING:
    from stayhub.client import StayHubClient

logger = get_logger(__name__)


class BookingStep(str, Enum):
    ROOM_SELECTION = "room_selection"
    GUEST_DETAILS = "guest_details"
    PAYMENT = "payment"
    RESULT = "result"


class BookingFlow:
    """
    Drives one booking from room selection to payment.

    The booking idempotency key is created with the flow, so confirming
    twice never creates two bookings.
    """

    def __init__(self, client: "StayHubClient", session: SessionManager, today: Optional[date] = None):
        self.client = client
        self.session = session
        self.today = today
        self.step = BookingStep.ROOM_SELECTION
        self.idempotency_key = generate_idempotency_key(BOOKING_KEY_PREFIX)

        self.hotel_id: Optional[int] = None
        self.room_type: Optional[RoomType] = None
        self.check_in: Optional[date] = None
        self.check_out: Optional[date] = None
        self.guests: int = 1
        self.preview: Optional[BookingPreview] = None
        self.guest_details: Optional[GuestDetails] = None
        self.booking: Optional[Booking] = None
        self.payment: Optional[PaymentSession] = None

    # -------------------------------------------------------------------------
    # Room selection
    # -------------------------------------------------------------------------

    @property
    def nights(self) -> int:
        if self.check_in is None or self.check_out is None:
            return 0
        return nights_between(self.check_in, self.check_out)

    @property
    def estimated_total(self):
        """Nightly price times nights, shown before the server preview arrives"""
        if self.room_type is None or self.check_in is None or self.check_out is None:
            return None
        return calculate_total_price(self.room_type.base_price, self.check_in, self.check_out)

    async def select_room(
        self,
        hotel_id: int,
        room_type: RoomType,
        check_in: date,
        check_out: date,
        guests: int = 1,
    ) -> ServiceResult[BookingPreview]:
        """Validate the stay and load the server-side price preview."""
        if not self.session.is_authenticated:
            return ServiceResult.unauthorized("Please log in to book a room")

        date_error = validate_stay_dates(check_in, check_out, today=self.today)
        if date_error:
            return ServiceResult.validation_failure(date_error, field="check_out")

        if guests < 1 or guests > room_type.max_guests:
            return ServiceResult.validation_failure(
                f"This room accommodates up to {room_type.max_guests} guests",
                field="guests",
            )

        try:
            preview = await self.client.bookings.get_booking_preview(
                PriceCalculationRequest(
                    hotel_id=hotel_id,
                    room_type_id=room_type.id,
                    check_in=check_in,
                    check_out=check_out,
                    guests=guests,
                )
            )
        except Exception as e:
            logger.error(
                "Booking preview failed",
                extra={"hotel_id": hotel_id, "room_type_id": room_type.id, "error_type": type(e).__name__},
            )
            return ServiceResult.from_exception(e, "Failed to load booking details")

        self.hotel_id = hotel_id
        self.room_type = room_type
        self.check_in = check_in
        self.check_out = check_out
        self.guests = guests
        self.preview = preview
        self.step = BookingStep.GUEST_DETAILS
        return ServiceResult.success(preview)

    # -------------------------------------------------------------------------
    # Guest details
    # -------------------------------------------------------------------------

    def set_guest_details(self, guest: Union[GuestDetails, Mapping[str, Any]]) -> ServiceResult[GuestDetails]:
        if self.step is not BookingStep.GUEST_DETAILS:
            return ServiceResult.invalid_state("Select a room before entering guest details")

        errors = validate_guest_details(guest)
        if errors:
            return ServiceResult.validation_failure(errors[0], details={"errors": errors})

        try:
            details = guest if isinstance(guest, GuestDetails) else GuestDetails.model_validate(dict(guest))
        except PydanticValidationError as e:
            messages = [err["msg"] for err in e.errors(include_url=False)]
            return ServiceResult.validation_failure(messages[0], details={"errors": messages})

        self.guest_details = details
        return ServiceResult.success(details)

    # -------------------------------------------------------------------------
    # Confirmation and payment
    # -------------------------------------------------------------------------

    async def confirm(self) -> ServiceResult[Booking]:
        """Create the booking and move to payment."""
        if self.step is not BookingStep.GUEST_DETAILS or self.guest_details is None:
            return ServiceResult.invalid_state("Missing booking information")

        request = BookingRequest(
            hotel_id=self.hotel_id,
            room_type_id=self.room_type.id,
            check_in=self.check_in,
            check_out=self.check_out,
            guests=self.guests,
            guest_details=self.guest_details,
            idempotency_key=self.idempotency_key,
        )
        try:
            booking = await self.client.bookings.create_booking(request)
        except Exception as e:
            logger.error(
                "Booking creation failed",
                extra={"hotel_id": self.hotel_id, "error_type": type(e).__name__},
            )
            return ServiceResult.from_exception(e, "Failed to create booking")

        self.booking = booking
        self.payment = PaymentSession(self.client.payments, booking.id, booking.total_amount)
        self.step = BookingStep.PAYMENT
        logger.info("Booking created", extra={"booking_id": booking.id, "hotel_id": self.hotel_id})
        return ServiceResult.success(booking)

    async def pay(self, method: PaymentMethod, details: Mapping[str, Any]) -> ServiceResult[PaymentTransaction]:
        if self.step is not BookingStep.PAYMENT or self.payment is None:
            return ServiceResult.invalid_state("Missing payment information. Please try again.")

        result = await self.payment.submit(method, details)
        if result:
            self.step = BookingStep.RESULT
        return result

    def status_poller(self, **kwargs: Any) -> PaymentStatusPoller:
        """Poller for the booking's payment, recording fetched statuses on the payment session"""
        if self.booking is None or self.payment is None:
            raise ValueError("No booking has been created yet")

        callback = kwargs.pop("on_update", None)

        def on_update(info):
            self.payment.apply_status(info)
            if callback is not None:
                callback(info)

        return PaymentStatusPoller(self.client.payments, self.booking.id, on_update=on_update, **kwargs)


class BookingCancellation:
    """Loads a booking and cancels it once the user confirms."""

    def __init__(self, client: "StayHubClient"):
        self.client = client
        self.booking: Optional[Booking] = None

    async def load(self, booking_id: int) -> ServiceResult[Booking]:
        try:
            self.booking = await self.client.bookings.get_booking(booking_id)
        except Exception as e:
            logger.error(
                "Failed to load booking",
                extra={"booking_id": booking_id, "error_type": type(e).__name__},
            )
            return ServiceResult.from_exception(e, "Failed to load booking details")
        return ServiceResult.success(self.booking)

    async def cancel(self, confirmed: bool = False) -> ServiceResult[Booking]:
        if self.booking is None:
            return ServiceResult.invalid_state("Booking not found. Please check the booking ID.")
        if self.booking.status == BookingStatus.CANCELLED:
            return ServiceResult.invalid_state("Booking is already cancelled")
        if not self.booking.is_cancellable:
            return ServiceResult.invalid_state("This booking can no longer be cancelled")
        if not confirmed:
            return ServiceResult.validation_failure("Please confirm the cancellation", field="confirmed")

        try:
            self.booking = await self.client.bookings.cancel_booking(self.booking.id)
        except Exception as e:
            logger.error(
                "Booking cancellation failed",
                extra={"booking_id": self.booking.id, "error_type": type(e).__name__},
            )
            return ServiceResult.from_exception(e, "Failed to cancel booking")

        logger.info("Booking cancelled", extra={"booking_id": self.booking.id})
        return ServiceResult.success(self.booking, message="Booking cancelled successfully")
