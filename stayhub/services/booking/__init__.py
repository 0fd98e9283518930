from stayhub.services.booking.comparison import FeatureValue, RoomComparison
from stayhub.services.booking.flow import BookingCancellation, BookingFlow, BookingStep
from stayhub.services.booking.pricing import (
    AvailabilityService,
    RoomOffer,
    calculate_total_price,
    format_currency,
    nights_between,
)

__all__ = [
    "AvailabilityService",
    "RoomOffer",
    "calculate_total_price",
    "format_currency",
    "nights_between",
    "RoomComparison",
    "FeatureValue",
    "BookingFlow",
    "BookingStep",
    "BookingCancellation",
]
