"""
Process-wide login session.

The session keeps the bearer token and the current user in memory and in a
persisted ``KeyValueStorage`` under the ``token`` and ``user`` keys. The API
client reads the token through ``token_provider`` and calls
``handle_unauthorized`` when the backend rejects it.
"""

import json
from typing import TYPE_CHECKING, Optional

from pydantic import ValidationError as PydanticValidationError

from stayhub.config.logging import get_logger
from stayhub.core.constants import STORAGE_TOKEN_KEY, STORAGE_USER_KEY
from stayhub.core.exceptions import ConfigurationError, NotAuthenticatedError
from stayhub.core.security import is_token_expired, user_id_from_token
from stayhub.schemas.user import AuthResponse, LoginCredentials, RegisterData, User
from stayhub.storage.base import KeyValueStorage

if TYPE_CHECKING:
    from stayhub.api.auth import AuthApi

logger = get_logger(__name__)


class SessionManager:
    """
    Holds the authenticated user and token.

    ``is_loading`` stays True until ``hydrate()`` has run once.
    """

    def __init__(self, storage: KeyValueStorage, auth_api: Optional["AuthApi"] = None):
        self.storage = storage
        self.auth_api = auth_api
        self._token: Optional[str] = None
        self._user: Optional[User] = None
        self._loading = True

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token) and self._user is not None

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def user_id(self) -> Optional[int]:
        """Current user id, falling back to the token claim"""
        if self._user is not None:
            return self._user.id
        if self._token:
            return user_id_from_token(self._token)
        return None

    def require_user(self) -> User:
        """
        Return the logged-in user.

        Raises:
            NotAuthenticatedError: No session exists
        """
        if not self.is_authenticated:
            raise NotAuthenticatedError()
        return self._user

    def token_provider(self) -> Optional[str]:
        return self._token

    # -------------------------------------------------------------------------
    # Rehydration
    # -------------------------------------------------------------------------

    def hydrate(self, now: Optional[float] = None) -> bool:
        """
        Restore the session from storage.

        Both entries must be present and the user entry must parse; a corrupt
        user entry or a token whose ``exp`` has passed clears both entries.

        Returns:
            Whether a session was restored
        """
        try:
            token = self.storage.get_item(STORAGE_TOKEN_KEY)
            raw_user = self.storage.get_item(STORAGE_USER_KEY)

            if not token or not raw_user:
                self._set_state(None, None)
                return False

            try:
                user = User.model_validate(json.loads(raw_user))
            except (json.JSONDecodeError, PydanticValidationError) as e:
                logger.warning("Stored user is corrupt, clearing session", extra={"error_type": type(e).__name__})
                self._clear_persisted()
                self._set_state(None, None)
                return False

            # Opaque tokens carry no expiry and are kept.
            if is_token_expired(token, now, strict=False):
                logger.info("Stored token has expired, clearing session")
                self._clear_persisted()
                self._set_state(None, None)
                return False

            self._set_state(token, user)
            logger.info("Session restored", extra={"user_id": user.id})
            return True
        finally:
            self._loading = False

    # -------------------------------------------------------------------------
    # Login / logout
    # -------------------------------------------------------------------------

    async def login(self, credentials: LoginCredentials) -> User:
        """
        Log in and persist the session.

        Raises:
            Whatever the auth endpoint raised, after clearing the session
        """
        api = self._require_api()
        try:
            response = await api.login(credentials)
        except Exception:
            self._set_state(None, None)
            logger.warning("Login failed")
            raise
        self.persist(response)
        logger.info("User logged in", extra={"user_id": response.user.id})
        return response.user

    async def register(self, data: RegisterData) -> User:
        """Register a new account and log it in."""
        api = self._require_api()
        try:
            response = await api.register(data)
        except Exception:
            self._set_state(None, None)
            logger.warning("Registration failed")
            raise
        self.persist(response)
        logger.info("User registered", extra={"user_id": response.user.id})
        return response.user

    def persist(self, response: AuthResponse) -> None:
        """Store a token/user pair handed out by the backend"""
        self.storage.set_item(STORAGE_TOKEN_KEY, response.token)
        self.storage.set_item(STORAGE_USER_KEY, response.user.model_dump_json())
        self._set_state(response.token, response.user)
        self._loading = False

    def update_user(self, user: User) -> None:
        """Replace the cached user after a profile update"""
        if not self._token:
            raise NotAuthenticatedError()
        self.storage.set_item(STORAGE_USER_KEY, user.model_dump_json())
        self._user = user

    def logout(self) -> None:
        self._clear_persisted()
        self._set_state(None, None)
        logger.info("User logged out")

    def handle_unauthorized(self) -> None:
        """Drop the session after the backend rejected the token"""
        if self._token:
            logger.warning("Session rejected by the server, logging out")
        self.logout()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _require_api(self) -> "AuthApi":
        if self.auth_api is None:
            raise ConfigurationError("Session has no auth API bound", setting="auth_api")
        return self.auth_api

    def _set_state(self, token: Optional[str], user: Optional[User]) -> None:
        self._token = token
        self._user = user

    def _clear_persisted(self) -> None:
        self.storage.remove_item(STORAGE_TOKEN_KEY)
        self.storage.remove_item(STORAGE_USER_KEY)
