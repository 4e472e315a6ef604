"""Asynchronous HTTP client for the remote API."""

from __future__ import annotations

from typing import Any

import httpx

from .api_errors import (
    ClientCreationError,
    Forbidden,
    RateLimitExceeded,
    RequestError,
    ResourceNotFound,
    ResponseParseError,
    ServerError,
    Unauthorized,
    UnsupportedMethod,
)
from .config import Config
from .request import ApiRequest, HttpMethod
from .response import ApiResponse

_SUCCESS_STATUSES = frozenset({200, 201, 202})
_SUPPORTED_METHODS = frozenset(
    {HttpMethod.GET, HttpMethod.POST, HttpMethod.PUT, HttpMethod.DELETE, HttpMethod.PATCH}
)
_STATUS_ERRORS = {
    404: ResourceNotFound,
    401: Unauthorized,
    403: Forbidden,
    429: RateLimitExceeded,
}


class ApiClient:
    """Sends requests to the API described by a :class:`Config`.

    ``transport`` replaces the network layer, e.g. with ``httpx.MockTransport``.
    """

    def __init__(self, config: Config, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.config = config
        try:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(config.timeout), transport=transport
            )
        except Exception as exc:
            raise ClientCreationError(str(exc)) from exc

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the underlying connections."""
        await self._client.aclose()

    def _url(self, endpoint: str) -> str:
        return f"{self.config.api_url}/{endpoint}"

    def _auth_headers(self) -> dict[str, str]:
        if self.config.api_key is None:
            return {}
        return {"Authorization": f"Bearer {self.config.api_key}"}

    async def _send(
        self,
        method: HttpMethod,
        url: str,
        headers: dict[str, str],
        params: dict[str, str] | None = None,
        body: Any = None,
    ) -> httpx.Response:
        try:
            return await self._client.request(
                method.value, url, headers=headers, params=params, json=body
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise RequestError(str(exc)) from exc

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        status = response.status_code
        if status in _SUCCESS_STATUSES:
            try:
                return response.json()
            except ValueError as exc:
                raise ResponseParseError(str(exc)) from exc
        error = _STATUS_ERRORS.get(status)
        if error is not None:
            raise error()
        try:
            text = response.text
        except Exception:
            text = "Unknown error"
        raise ServerError(status, text)

    async def get(self, endpoint: str) -> Any:
        """GET ``endpoint`` and return the decoded JSON body."""
        response = await self._send(HttpMethod.GET, self._url(endpoint), self._auth_headers())
        return self._decode(response)

    async def post(self, endpoint: str, body: Any) -> Any:
        """POST ``body`` as JSON to ``endpoint`` and return the decoded JSON body."""
        response = await self._send(
            HttpMethod.POST, self._url(endpoint), self._auth_headers(), body=body
        )
        return self._decode(response)

    async def execute(self, request: ApiRequest) -> ApiResponse:
        """Send a fully described request and return status, headers and body."""
        if request.method not in _SUPPORTED_METHODS:
            raise UnsupportedMethod()
        url = request.path if request.path.startswith("http") else self._url(request.path)
        headers = {**self._auth_headers(), **request.headers}
        response = await self._send(
            request.method,
            url,
            headers,
            params=dict(request.query_params),
            body=request.body,
        )
        body = self._decode(response)
        return ApiResponse(response.status_code, dict(response.headers.items()), body)