# stayhub/core/constants.py
"""
Core SDK constants.

These values centralize literals shared by the API client, the session
manager and the booking services:
- Persisted storage keys.
- HTTP header names.
- Booking/payment flow defaults (can be overridden by settings).
"""

# Persisted storage keys
STORAGE_TOKEN_KEY: str = "token"
STORAGE_USER_KEY: str = "user"
WISHLIST_KEY_PREFIX: str = "wishlist_"

# Common HTTP header names
HEADER_AUTHORIZATION: str = "Authorization"
HEADER_IDEMPOTENCY_KEY: str = "Idempotency-Key"

# Idempotency key prefixes
PAYMENT_KEY_PREFIX: str = "payment"
BOOKING_KEY_PREFIX: str = "booking"

# Flow defaults
PAYMENT_POLL_INTERVAL_SECONDS_DEFAULT: float = 3.0
MAX_COMPARISON_ROOMS_DEFAULT: int = 4

# Pagination defaults
DEFAULT_PAGE: int = 1
DEFAULT_PAGE_SIZE: int = 10
