"""
HTTP transport shared by every resource client.
"""

from functools import lru_cache
from typing import Any, Dict, Optional, Type, TypeVar, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from .config import DEFAULT_BASE_URL, get_logger
from .core.errors import build_api_error, build_auth_headers
from .exceptions import InvalidResponseError, NetworkError
from .models import RequestModel

logger = get_logger("http")

T = TypeVar("T")

USER_AGENT = "stack0-python/1.0.0"

Body = Union[RequestModel, Dict[str, Any]]


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class HTTPClient:
    """Authenticated JSON transport for the Stack0 API.

    Holds no state besides the connection pool and its immutable
    configuration, so one instance is safely shared by all resource clients
    and by concurrent tasks.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            headers=build_auth_headers(api_key, USER_AGENT),
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        result_type: Optional[Type[T]] = None,
        body: Optional[Body] = None,
    ) -> Optional[T]:
        """Send one request and decode the response into ``result_type``.

        Raises:
            APIError: The API answered with a status of 400 or above.
            NetworkError: No response was received.
            InvalidResponseError: The success body did not match ``result_type``.
        """
        payload = body.to_body() if isinstance(body, RequestModel) else body

        logger.debug("%s %s", method, path)
        try:
            if payload is None:
                response = await self._client.request(method, path)
            else:
                response = await self._client.request(method, path, json=payload)
        except httpx.RequestError as e:
            raise NetworkError(f"Request failed: {e}", {"path": path}) from e

        logger.debug("%s %s -> %d", method, path, response.status_code)

        if response.status_code >= 400:
            raise build_api_error(response.status_code, response.text)

        return self._decode(response, result_type)

    def _decode(self, response: httpx.Response, result_type: Optional[Type[T]]) -> Optional[T]:
        if result_type is None:
            return None

        try:
            data = response.json() if response.content else {}
        except ValueError as e:
            raise InvalidResponseError(
                f"Invalid JSON in response: {e}",
                {"status_code": response.status_code},
            ) from e

        try:
            return _adapter(result_type).validate_python(data)
        except ValidationError as e:
            raise InvalidResponseError(
                f"Unexpected response shape: {e.error_count()} validation error(s)",
                {"errors": e.errors(include_url=False)},
            ) from e

    async def get(self, path: str, result_type: Optional[Type[T]] = None) -> Optional[T]:
        return await self.request("GET", path, result_type)

    async def post(
        self, path: str, body: Optional[Body], result_type: Optional[Type[T]] = None
    ) -> Optional[T]:
        return await self.request("POST", path, result_type, body)

    async def put(
        self, path: str, body: Optional[Body], result_type: Optional[Type[T]] = None
    ) -> Optional[T]:
        return await self.request("PUT", path, result_type, body)

    async def patch(
        self, path: str, body: Optional[Body], result_type: Optional[Type[T]] = None
    ) -> Optional[T]:
        return await self.request("PATCH", path, result_type, body)

    async def delete(
        self,
        path: str,
        result_type: Optional[Type[T]] = None,
        body: Optional[Body] = None,
    ) -> Optional[T]:
        """DELETE, optionally with a JSON body as some endpoints require."""
        return await self.request("DELETE", path, result_type, body)
