import json

import pytest

from stayhub.auth.session import SessionManager
from stayhub.core.constants import STORAGE_TOKEN_KEY, STORAGE_USER_KEY
from stayhub.navigation import PROTECTED_ROUTES, resolve
from stayhub.storage.memory import InMemoryStorage
from tests.conftest import USER, make_token


@pytest.fixture
def anonymous() -> SessionManager:
    session = SessionManager(InMemoryStorage())
    session.hydrate()
    return session


@pytest.fixture
def signed_in() -> SessionManager:
    storage = InMemoryStorage({STORAGE_TOKEN_KEY: make_token(), STORAGE_USER_KEY: json.dumps(USER)})
    session = SessionManager(storage)
    session.hydrate()
    return session


@pytest.mark.parametrize("path", ["/", "/login", "/register", "/hotels", "/hotels/12"])
def test_public_routes_need_no_session(path, anonymous):
    result = resolve(path, anonymous)

    assert result.redirect_to is None
    assert not result.route.requires_auth


def test_route_params_are_extracted(anonymous):
    result = resolve("/hotels/12", anonymous)

    assert result.route.name == "hotel_details"
    assert result.params == {"id": "12"}


def test_gated_route_redirects_to_login_with_origin(anonymous):
    result = resolve("/hotels/12/book", anonymous)

    assert result.route.name == "book_hotel"
    assert result.redirect_to == "/login?from=%2Fhotels%2F12%2Fbook"


@pytest.mark.parametrize("route", PROTECTED_ROUTES, ids=lambda route: route.name)
def test_every_gated_route_redirects_without_session(route, anonymous):
    path = route.path.replace(":hotelId", "3").replace(":id", "3")

    assert resolve(path, anonymous).redirect_to.startswith("/login?from=")


def test_gated_route_with_session(signed_in):
    result = resolve("/hotels/3/rooms", signed_in)

    assert result.redirect_to is None
    assert result.route.name == "rooms_management"
    assert result.params == {"hotelId": "3"}


def test_admin_routes_are_gated_by_session_only(signed_in):
    assert resolve("/admin/audit", signed_in).redirect_to is None


def test_unknown_path_redirects_home(signed_in):
    result = resolve("/no/such/page", signed_in)

    assert result.route is None
    assert result.redirect_to == "/"


def test_trailing_slash_and_query_are_ignored(signed_in):
    result = resolve("/bookings/9/cancel/?reason=plans", signed_in)

    assert result.route.name == "cancel_booking"
    assert result.params == {"id": "9"}
