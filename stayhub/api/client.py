"""
HTTP client for the booking backend.

Every resource wrapper goes through ``ApiClient.request``, which:
- serializes pydantic request bodies and query parameters,
- attaches the bearer token of the current session,
- maps non-2xx responses to typed exceptions carrying the server message,
- decodes 2xx bodies into the endpoint's documented contract type.

No retries, caching or batching happen at this layer.
"""

import time
from functools import lru_cache
from typing import Any, Callable, Dict, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from stayhub.config.logging import get_logger
from stayhub.config.settings import settings
from stayhub.core.constants import HEADER_AUTHORIZATION
from stayhub.core.exceptions import (
    AuthenticationError,
    BaseAppException,
    ErrorCode,
    ResponseDecodeError,
    TransportError,
    raise_for_response,
)

T = TypeVar("T")

TokenProvider = Callable[[], Optional[str]]
UnauthorizedHandler = Callable[[], None]


@lru_cache(maxsize=256)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


def _serialize(value: Any) -> Any:
    """Turn pydantic models (and lists of them) into JSON-ready data"""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    return value


def _clean_params(params: Any) -> Optional[Dict[str, Any]]:
    data = _serialize(params)
    if not data:
        return None
    if not isinstance(data, Mapping):
        raise TypeError("Query parameters must be a mapping or a schema")
    return {key: value for key, value in data.items() if value is not None}


class ApiClient:
    """
    Async REST client bound to one backend base URL.

    The session is passed in explicitly: ``token_provider`` returns the
    current bearer token (or None) and ``on_unauthorized`` is invoked before
    an ``AuthenticationError`` is raised for a 401 response.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_provider: Optional[TokenProvider] = None,
        on_unauthorized: Optional[UnauthorizedHandler] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.token_provider = token_provider
        self.on_unauthorized = on_unauthorized
        self._logger = get_logger(__name__)

        default_headers = {"Content-Type": "application/json", "Accept": "application/json"}
        default_headers.update(headers or {})

        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.API_TIMEOUT_SECONDS,
            headers=default_headers,
            transport=transport,
        )

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # -------------------------------------------------------------------------
    # Requests
    # -------------------------------------------------------------------------

    def _build_headers(self, extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        token = self.token_provider() if self.token_provider else None
        if token:
            headers[HEADER_AUTHORIZATION] = f"Bearer {token}"
        if extra:
            headers.update(extra)
        return headers

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Any = None,
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        fallback_message: str = "Request failed",
    ) -> httpx.Response:
        """
        Issue a request and return the successful response.

        Raises:
            TransportError: The backend could not be reached
            AuthenticationError: 401 response (session handler already invoked)
            ApiError: Any other non-2xx response
        """
        started = time.perf_counter()
        try:
            response = await self._http.request(
                method,
                path,
                params=_clean_params(params),
                json=_serialize(json) if json is not None else None,
                headers=self._build_headers(headers),
            )
        except httpx.TimeoutException as e:
            self._logger.error("Request timed out", extra={"method": method, "path": path})
            raise TransportError(f"{fallback_message}: request timed out", ErrorCode.TIMEOUT_ERROR) from e
        except httpx.HTTPError as e:
            self._logger.error(
                "Request could not be sent",
                extra={"method": method, "path": path, "error_type": type(e).__name__},
            )
            raise TransportError(f"{fallback_message}: network error") from e

        elapsed = time.perf_counter() - started
        self._logger.debug(
            "API request completed",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "execution_time": round(elapsed, 4),
            },
        )

        try:
            raise_for_response(response, fallback_message)
        except BaseAppException as error:
            if isinstance(error, AuthenticationError) and self.on_unauthorized is not None:
                self.on_unauthorized()
            self._logger.warning(
                "API request failed",
                extra={"method": method, "path": path, "status_code": response.status_code, "reason": error.message},
            )
            raise
        return response

    async def request(
        self,
        method: str,
        path: str,
        *,
        response_model: Optional[Union[Type[T], Any]] = None,
        params: Any = None,
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        fallback_message: str = "Request failed",
    ) -> Any:
        """
        Issue a request and decode the JSON body.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            response_model: Contract type of the body; None returns raw JSON
            params: Query parameters (mapping or request schema)
            json: Request body (mapping or request schema)
            headers: Extra headers
            fallback_message: Error message when the server provides none

        Returns:
            The decoded body (None for empty responses)

        Raises:
            ResponseDecodeError: Body does not match ``response_model``
        """
        response = await self.send(
            method,
            path,
            params=params,
            json=json,
            headers=headers,
            fallback_message=fallback_message,
        )

        if response.status_code == 204 or not response.content:
            payload = None
        else:
            try:
                payload = response.json()
            except ValueError as e:
                raise ResponseDecodeError(f"{fallback_message}: response is not JSON", endpoint=path) from e

        if response_model is None:
            return payload

        try:
            return _adapter(response_model).validate_python(payload)
        except PydanticValidationError as e:
            self._logger.error(
                "Response does not match contract",
                extra={"path": path, "error_count": e.error_count()},
            )
            raise ResponseDecodeError(
                f"{fallback_message}: unexpected response shape",
                endpoint=path,
                errors=e.errors(include_url=False),
            ) from e

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> Any:
        return await self.request("PUT", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> Any:
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", path, **kwargs)


class BaseResource:
    """Base class of the per-resource API wrappers"""

    def __init__(self, client: ApiClient):
        self.client = client
