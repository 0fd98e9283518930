import json

import pytest

from stayhub.auth.session import SessionManager
from stayhub.core.constants import STORAGE_TOKEN_KEY, STORAGE_USER_KEY
from stayhub.core.exceptions import AuthenticationError, ConflictError, NotAuthenticatedError
from stayhub.schemas.user import LoginCredentials, RegisterData
from stayhub.storage.memory import InMemoryStorage
from tests.conftest import USER, VALID_PASSWORD, make_token


class TestHydrate:

    def test_token_and_user_restore_session(self):
        token = make_token()
        storage = InMemoryStorage({STORAGE_TOKEN_KEY: token, STORAGE_USER_KEY: json.dumps(USER)})
        session = SessionManager(storage)
        assert session.is_loading

        assert session.hydrate() is True

        assert session.is_authenticated
        assert not session.is_loading
        assert session.token == token
        assert session.user.email == USER["email"]

    def test_token_alone_is_not_a_session(self):
        storage = InMemoryStorage({STORAGE_TOKEN_KEY: make_token()})
        session = SessionManager(storage)

        assert session.hydrate() is False
        assert not session.is_authenticated
        assert not session.is_loading

    def test_corrupt_user_clears_both_entries(self):
        storage = InMemoryStorage({STORAGE_TOKEN_KEY: make_token(), STORAGE_USER_KEY: "{not json"})
        session = SessionManager(storage)

        assert session.hydrate() is False

        assert not session.is_authenticated
        assert storage.get_item(STORAGE_TOKEN_KEY) is None
        assert storage.get_item(STORAGE_USER_KEY) is None

    def test_user_with_wrong_shape_clears_session(self):
        storage = InMemoryStorage({STORAGE_TOKEN_KEY: make_token(), STORAGE_USER_KEY: json.dumps({"id": "x"})})
        session = SessionManager(storage)

        assert session.hydrate() is False
        assert storage.keys() == []

    def test_expired_jwt_is_dropped(self):
        storage = InMemoryStorage({
            STORAGE_TOKEN_KEY: make_token(expires_in=-60),
            STORAGE_USER_KEY: json.dumps(USER),
        })
        session = SessionManager(storage)

        assert session.hydrate() is False
        assert storage.keys() == []

    def test_opaque_token_is_kept(self):
        storage = InMemoryStorage({STORAGE_TOKEN_KEY: "opaque-token", STORAGE_USER_KEY: json.dumps(USER)})
        session = SessionManager(storage)

        assert session.hydrate() is True
        assert session.user_id == USER["id"]


class TestLoginLogout:

    async def test_login_persists_token_and_user(self, client, storage, backend):
        user = await client.session.login(LoginCredentials(email=USER["email"], password=VALID_PASSWORD))

        assert user.id == USER["id"]
        assert client.session.is_authenticated
        assert storage.get_item(STORAGE_TOKEN_KEY) == backend.token
        assert json.loads(storage.get_item(STORAGE_USER_KEY))["email"] == USER["email"]

    async def test_login_failure_clears_state_and_reraises(self, client, storage):
        with pytest.raises(AuthenticationError) as exc_info:
            await client.session.login(LoginCredentials(email=USER["email"], password="wrong"))

        assert exc_info.value.message == "Invalid email or password"
        assert not client.session.is_authenticated
        assert storage.get_item(STORAGE_TOKEN_KEY) is None

    async def test_register_logs_in(self, client):
        user = await client.session.register(
            RegisterData(name="Grace Host", email="grace@stayhub.io", password="long-enough")
        )

        assert user.name == "Grace Host"
        assert client.session.is_authenticated

    async def test_register_conflict_is_raised(self, client):
        with pytest.raises(ConflictError) as exc_info:
            await client.session.register(
                RegisterData(name="Taken", email="taken@stayhub.io", password="long-enough")
            )

        assert exc_info.value.message == "Email already registered"
        assert not client.session.is_authenticated

    async def test_logout_removes_persisted_entries(self, logged_in_client, storage):
        logged_in_client.session.logout()

        assert not logged_in_client.session.is_authenticated
        assert storage.get_item(STORAGE_TOKEN_KEY) is None
        assert storage.get_item(STORAGE_USER_KEY) is None

    async def test_require_user(self, client):
        with pytest.raises(NotAuthenticatedError):
            client.session.require_user()


class TestUnauthorizedResponse:

    async def test_bearer_token_is_sent(self, logged_in_client, backend):
        profile = await logged_in_client.auth.get_profile()

        assert profile.id == USER["id"]
        assert backend.last("/api/users/profile")["headers"]["authorization"] == f"Bearer {backend.token}"

    async def test_401_logs_the_session_out(self, logged_in_client, backend, storage):
        backend.token = make_token(user_id=99)

        with pytest.raises(AuthenticationError):
            await logged_in_client.auth.get_profile()

        assert not logged_in_client.session.is_authenticated
        assert storage.get_item(STORAGE_TOKEN_KEY) is None
