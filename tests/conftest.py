"""
Shared fixtures: an in-process fake backend and clients wired to it.

The fake backend is a FastAPI app mounted through ``httpx.ASGITransport``;
it keeps its state in ``FakeBackend`` and records every request so tests
can assert on headers and bodies.
"""

import time
from datetime import date
from typing import Any, Dict, List, Optional

import httpx
import jwt
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from stayhub.api.client import ApiClient
from stayhub.client import StayHubClient
from stayhub.config.settings import Settings
from stayhub.storage.memory import InMemoryStorage

API_BASE_URL = "http://testserver/api"
VALID_PASSWORD = "correct-horse"

USER = {
    "id": 7,
    "name": "Ada Guest",
    "email": "ada@stayhub.io",
    "role": "user",
    "phone": "+1 555 010 2030",
}


def make_token(user_id: int = 7, expires_in: Optional[int] = 3600) -> str:
    claims: Dict[str, Any] = {"userId": user_id}
    if expires_in is not None:
        claims["exp"] = int(time.time()) + expires_in
    return jwt.encode(claims, "test-signing-key", algorithm="HS256")


def room_type_payload(room_id: int, **overrides) -> Dict[str, Any]:
    payload = {
        "id": room_id,
        "hotel_id": 1,
        "name": f"Room {room_id}",
        "description": "Comfortable room",
        "base_price": 100,
        "max_guests": 2,
        "available_rooms": 3,
        "total_rooms": 5,
    }
    payload.update(overrides)
    return payload


class FakeBackend:
    """State and request log of the fake booking backend"""

    def __init__(self):
        self.requests: List[Dict[str, Any]] = []
        self.token = make_token()
        self.bookings: Dict[int, Dict[str, Any]] = {}
        self.booking_keys: Dict[str, int] = {}
        self.payment_status = "pending"
        self.status_sequence: List[str] = []
        self.wishlist: List[Dict[str, Any]] = []
        self.app = self._build_app()

    def record(self, request: Request, body: Any = None) -> None:
        self.requests.append({
            "method": request.method,
            "path": request.url.path,
            "query": dict(request.query_params),
            "headers": dict(request.headers),
            "json": body,
        })

    def last(self, path: str) -> Dict[str, Any]:
        matching = [r for r in self.requests if r["path"] == path]
        assert matching, f"no request recorded for {path}"
        return matching[-1]

    def _authorized(self, request: Request) -> bool:
        return request.headers.get("authorization") == f"Bearer {self.token}"

    def _build_app(self) -> FastAPI:
        app = FastAPI()
        backend = self

        async def body_of(request: Request) -> Any:
            raw = await request.body()
            return await request.json() if raw else None

        # ---------------- auth ----------------

        @app.post("/api/auth/login")
        async def login(request: Request):
            body = await body_of(request)
            backend.record(request, body)
            if body.get("password") != VALID_PASSWORD:
                return JSONResponse({"message": "Invalid email or password"}, status_code=401)
            return {"token": backend.token, "user": USER}

        @app.post("/api/auth/register")
        async def register(request: Request):
            body = await body_of(request)
            backend.record(request, body)
            if body.get("email") == "taken@stayhub.io":
                return JSONResponse({"error": "Email already registered"}, status_code=409)
            return {"token": backend.token, "user": {**USER, "name": body["name"], "email": body["email"]}}

        @app.get("/api/users/profile")
        async def profile(request: Request):
            backend.record(request)
            if not backend._authorized(request):
                return JSONResponse({"message": "Token expired"}, status_code=401)
            return USER

        # ---------------- hotels ----------------

        @app.get("/api/hotels")
        async def hotels(request: Request):
            backend.record(request)
            return {
                "data": [{"id": 1, "name": "Seaside Inn", "status": "approved"}],
                "pagination": {"page": 1, "limit": 10, "total": 1, "totalPages": 1},
            }

        @app.get("/api/hotels/{hotel_id}")
        async def hotel(hotel_id: int, request: Request):
            backend.record(request)
            if hotel_id == 404:
                return JSONResponse({"message": "Hotel not found"}, status_code=404)
            if hotel_id == 500:
                return JSONResponse({}, status_code=500)
            if hotel_id == 999:
                return {"hotel": {"id": 999}}
            return {"id": hotel_id, "name": "Seaside Inn", "status": "approved"}

        @app.get("/api/room-types/hotel/{hotel_id}/available")
        async def available(hotel_id: int, request: Request):
            backend.record(request)
            return {
                "hotel_id": hotel_id,
                "check_in": request.query_params["checkIn"],
                "check_out": request.query_params["checkOut"],
                "room_types": [
                    room_type_payload(1, base_price=120, max_guests=2),
                    room_type_payload(2, base_price="89.50", max_guests=4),
                ],
            }

        # ---------------- bookings ----------------

        @app.post("/api/bookings/preview")
        async def preview(request: Request):
            body = await body_of(request)
            backend.record(request, body)
            nights = (date.fromisoformat(body["check_out"]) - date.fromisoformat(body["check_in"])).days
            subtotal = 120 * nights
            return {
                "hotel": {"id": body["hotel_id"], "name": "Seaside Inn"},
                "room_type": {"id": body["room_type_id"], "name": "Deluxe", "base_price": 120, "max_guests": 2},
                "check_in": body["check_in"],
                "check_out": body["check_out"],
                "guests": body["guests"],
                "price_breakdown": {
                    "base_price": 120,
                    "total_nights": nights,
                    "subtotal": subtotal,
                    "taxes": [{"name": "City tax", "amount": 12, "percentage": 5}],
                    "total_taxes": 12,
                    "total_amount": subtotal + 12,
                },
            }

        @app.get("/api/bookings/export")
        async def export_bookings(request: Request):
            backend.record(request)
            return Response("id,status\n1,confirmed\n", media_type="text/csv")

        @app.post("/api/bookings")
        async def create_booking(request: Request):
            body = await body_of(request)
            backend.record(request, body)
            key = body.get("idempotency_key")
            if key in backend.booking_keys:
                return backend.bookings[backend.booking_keys[key]]
            booking_id = 100 + len(backend.bookings)
            booking = {
                "id": booking_id,
                "hotel_id": body["hotel_id"],
                "room_type_id": body["room_type_id"],
                "check_in": body["check_in"],
                "check_out": body["check_out"],
                "guests": body["guests"],
                "total_amount": 252,
                "status": "pending",
                "payment_status": "pending",
            }
            backend.bookings[booking_id] = booking
            backend.booking_keys[key] = booking_id
            return booking

        @app.get("/api/bookings/{booking_id}")
        async def get_booking(booking_id: int, request: Request):
            backend.record(request)
            if booking_id not in backend.bookings:
                return JSONResponse({"message": "Booking not found"}, status_code=404)
            return backend.bookings[booking_id]

        @app.put("/api/bookings/{booking_id}/cancel")
        async def cancel_booking(booking_id: int, request: Request):
            backend.record(request, await body_of(request))
            backend.bookings[booking_id]["status"] = "cancelled"
            return backend.bookings[booking_id]

        # ---------------- payments ----------------

        @app.post("/api/payments")
        async def create_payment(request: Request):
            body = await body_of(request)
            backend.record(request, body)
            if body["payment_details"].get("card_number") == "0002":
                return JSONResponse({"message": "Card declined"}, status_code=402)
            return {
                "id": 1,
                "booking_id": body["booking_id"],
                "amount": body["amount"],
                "status": backend.payment_status,
                "transaction_id": "txn_1",
            }

        @app.post("/api/payments/{booking_id}/retry")
        async def retry_payment(booking_id: int, request: Request):
            backend.record(request, await body_of(request))
            return {"id": 2, "booking_id": booking_id, "amount": 252, "status": "pending", "transaction_id": "txn_2"}

        @app.post("/api/payments/{booking_id}/cancel")
        async def cancel_payment(booking_id: int, request: Request):
            backend.record(request, await body_of(request))
            return Response(status_code=204)

        @app.get("/api/booking-payments/booking/{booking_id}")
        async def payment_status(booking_id: int, request: Request):
            backend.record(request)
            status = backend.status_sequence.pop(0) if backend.status_sequence else backend.payment_status
            return {"status": status, "transaction_id": "txn_1"}

        # ---------------- wishlist ----------------

        @app.get("/api/wishlist")
        async def wishlist(request: Request):
            backend.record(request)
            return backend.wishlist

        @app.post("/api/wishlist")
        async def add_wishlist(request: Request):
            body = await body_of(request)
            backend.record(request, body)
            if any(item["hotel_id"] == body["hotel_id"] for item in backend.wishlist):
                return JSONResponse({"message": "Hotel already in wishlist"}, status_code=409)
            item = {
                "id": len(backend.wishlist) + 1,
                "user_id": USER["id"],
                "hotel_id": body["hotel_id"],
                "hotel_name": "Seaside Inn",
                "created_at": "2030-01-01T00:00:00Z",
            }
            backend.wishlist.append(item)
            return item

        @app.delete("/api/wishlist/{hotel_id}")
        async def remove_wishlist(hotel_id: int, request: Request):
            backend.record(request)
            backend.wishlist = [item for item in backend.wishlist if item["hotel_id"] != hotel_id]
            return Response(status_code=204)

        return app


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def transport(backend: FakeBackend) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=backend.app)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        API_BASE_URL=API_BASE_URL,
        STORAGE_URL="sqlite://",
        PAYMENT_POLL_INTERVAL_SECONDS=3.0,
        _env_file=None,
    )


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
async def client(test_settings, storage, transport):
    sdk = StayHubClient(app_settings=test_settings, storage=storage, transport=transport)
    yield sdk
    await sdk.aclose()


@pytest.fixture
async def logged_in_client(client, backend):
    from stayhub.schemas.user import LoginCredentials

    await client.session.login(LoginCredentials(email=USER["email"], password=VALID_PASSWORD))
    return client


@pytest.fixture
async def api_client(transport):
    http = ApiClient(base_url=API_BASE_URL, transport=transport)
    yield http
    await http.aclose()


class FakeSleep:
    """Records requested delays instead of sleeping"""

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def fake_sleep() -> FakeSleep:
    return FakeSleep()
