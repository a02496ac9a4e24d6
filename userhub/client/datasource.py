"""HTTP data source wrapping an ``httpx.AsyncClient``."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from .errors import ApiRequestError

logger = logging.getLogger(__name__)


class ApiDataSource:
    """Sends JSON requests to the API and manages the attached bearer token."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000/api",
        *,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self._client.headers["Content-Type"] = "application/json"

    @property
    def auth_token(self) -> Optional[str]:
        header = self._client.headers.get("Authorization")
        if header and header.startswith("Bearer "):
            return header[len("Bearer "):]
        return None

    def set_auth_token(self, token: str) -> None:
        self._client.headers["Authorization"] = f"Bearer {token}"

    def clear_auth_token(self) -> None:
        self._client.headers.pop("Authorization", None)

    async def get(self, endpoint: str) -> Any:
        return await self._request("GET", endpoint)

    async def post(self, endpoint: str, data: Any = None) -> Any:
        return await self._request("POST", endpoint, data)

    async def put(self, endpoint: str, data: Any = None) -> Any:
        return await self._request("PUT", endpoint, data)

    async def delete(self, endpoint: str) -> Any:
        return await self._request("DELETE", endpoint)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, endpoint: str, data: Any = None) -> Any:
        try:
            response = await self._client.request(method, endpoint, json=data)
        except httpx.HTTPError as exc:
            logger.error("Network error on %s %s: %s", method, endpoint, exc)
            raise

        payload = _decode(response)
        if response.is_error:
            logger.error("API error %s on %s %s: %s", response.status_code, method, endpoint, payload)
            raise ApiRequestError(response.status_code, payload)
        return payload


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
