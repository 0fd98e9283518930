"""
Route table of the application shell.

``resolve`` matches a path against the table, extracts ``:param`` segments
and decides where a visitor without a session is sent.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Pattern, Tuple
from urllib.parse import urlencode, urlsplit

from stayhub.auth.session import SessionManager

LOGIN_PATH = "/login"
HOME_PATH = "/"


@dataclass(frozen=True)
class Route:
    path: str
    name: str
    requires_auth: bool = True


@dataclass(frozen=True)
class RouteMatch:
    route: Optional[Route]
    params: Dict[str, str] = field(default_factory=dict)
    redirect_to: Optional[str] = None

    @property
    def is_redirect(self) -> bool:
        return self.redirect_to is not None


PUBLIC_ROUTES: List[Route] = [
    Route("/", "home", requires_auth=False),
    Route("/login", "login", requires_auth=False),
    Route("/register", "register", requires_auth=False),
    Route("/hotels", "hotels", requires_auth=False),
    Route("/hotels/:id", "hotel_details", requires_auth=False),
]

PROTECTED_ROUTES: List[Route] = [
    Route("/dashboard", "dashboard"),
    Route("/profile", "profile"),
    Route("/user-management", "user_management"),
    Route("/my-hotels", "my_hotels"),
    Route("/my-hotels/:id", "my_hotel_details"),
    Route("/my-addresses", "my_addresses"),
    Route("/my-bookings", "my_bookings"),
    Route("/wishlist", "wishlist"),
    Route("/hotel-management", "hotel_management"),
    Route("/bookings/:id", "booking_details"),
    Route("/bookings/:id/cancel", "cancel_booking"),
    Route("/hotels/:id/book", "book_hotel"),
    Route("/create-hotel", "create_hotel"),
    Route("/hotels/:id/edit", "edit_hotel"),
    Route("/booking-confirmation", "booking_confirmation"),
    Route("/payment", "payment"),
    Route("/payment-result", "payment_result"),
    Route("/hotels/:hotelId/dashboard", "hotel_dashboard"),
    Route("/hotels/:hotelId/rooms", "rooms_management"),
    Route("/hotels/:hotelId/pricing", "pricing_management"),
    Route("/hotels/:hotelId/amenities", "amenities_management"),
    Route("/admin", "admin_dashboard"),
    Route("/admin/users", "admin_users"),
    Route("/admin/users/:id", "admin_user_details"),
    Route("/admin/hotel-approval", "admin_hotel_approval"),
    Route("/admin/bookings", "admin_bookings"),
    Route("/admin/payments", "admin_payments"),
    Route("/admin/audit", "admin_audit"),
]

ROUTES: List[Route] = PUBLIC_ROUTES + PROTECTED_ROUTES


def _compile(path: str) -> Pattern:
    pattern = re.sub(r":(\w+)", r"(?P<\1>[^/]+)", path)
    return re.compile(f"^{pattern}$")


_COMPILED: List[Tuple[Route, Pattern]] = [(route, _compile(route.path)) for route in ROUTES]


def match(path: str) -> Optional[Tuple[Route, Dict[str, str]]]:
    """Find the route for ``path`` (query string and trailing slash ignored)"""
    clean = urlsplit(path).path or HOME_PATH
    if len(clean) > 1:
        clean = clean.rstrip("/")
    for route, pattern in _COMPILED:
        found = pattern.match(clean)
        if found:
            return route, found.groupdict()
    return None


def resolve(path: str, session: SessionManager) -> RouteMatch:
    """
    Resolve a navigation target.

    Unknown paths redirect home; gated routes without a session redirect to
    the login page with the requested path in ``from``.
    """
    found = match(path)
    if found is None:
        return RouteMatch(route=None, redirect_to=HOME_PATH)

    route, params = found
    if route.requires_auth and not session.is_authenticated:
        return RouteMatch(route=route, params=params, redirect_to=f"{LOGIN_PATH}?{urlencode({'from': path})}")

    return RouteMatch(route=route, params=params)
