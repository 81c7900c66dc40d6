"""Async HTTP client wrapping the marketplace REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from src.core import endpoints
from src.core.config import settings
from src.core.exceptions import AuthenticationError, TransportError, error_from_response

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
}


class ApiClient:
    """Thin wrapper over ``httpx.AsyncClient`` returning decoded JSON bodies.

    Failures are never retried: transport errors become ``TransportError`` and
    unsuccessful statuses are mapped by ``error_from_response``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        token: str | None = None,
        user_type: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                base_url=base_url or settings.api_url,
                timeout=timeout if timeout is not None else settings.api_timeout_seconds,
            )
        self._client = client
        self.token = token if token is not None else settings.api_token
        self.user_type = user_type if user_type is not None else settings.api_user_type

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _headers(self, requires_auth: bool) -> dict[str, str]:
        headers = dict(_DEFAULT_HEADERS)
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
            if self.user_type:
                headers["X-User-Type"] = self.user_type
        elif requires_auth:
            raise AuthenticationError("Authentification requise. Aucun token trouvé.")
        return headers

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        requires_auth: bool = False,
    ) -> Any:
        headers = self._headers(requires_auth)
        logger.debug("API request %s %s params=%s", method, url, params)
        try:
            response = await self._client.request(method, url, params=params, json=json, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("API request %s %s failed: %s", method, url, exc)
            raise TransportError(f"Impossible de contacter le serveur API: {exc}") from exc

        logger.debug("API response %s %s -> %s", method, url, response.status_code)
        payload = self._decode(response)
        if response.is_success:
            return {} if payload is None else payload

        error = error_from_response(response.status_code, payload)
        logger.warning("API error %s %s: %s", method, url, error.detail)
        raise error

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if response.status_code == httpx.codes.NO_CONTENT or not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError:
            if response.is_success:
                logger.warning(
                    "Invalid JSON body with status %s from %s: %.200s",
                    response.status_code,
                    response.request.url,
                    response.text,
                )
                return None
            return response.text

    async def get(self, url: str, params: dict[str, Any] | None = None, *, requires_auth: bool = False) -> Any:
        return await self.request("GET", url, params=params, requires_auth=requires_auth)

    async def post(self, url: str, json: Any = None, *, requires_auth: bool = False) -> Any:
        return await self.request("POST", url, json=json, requires_auth=requires_auth)

    async def put(self, url: str, json: Any = None, *, requires_auth: bool = False) -> Any:
        return await self.request("PUT", url, json=json, requires_auth=requires_auth)

    async def patch(self, url: str, json: Any = None, *, requires_auth: bool = False) -> Any:
        return await self.request("PATCH", url, json=json, requires_auth=requires_auth)

    async def delete(self, url: str, *, requires_auth: bool = False) -> Any:
        return await self.request("DELETE", url, requires_auth=requires_auth)

    async def ping(self) -> bool:
        """Return whether the API answers at all (any HTTP status counts)."""
        try:
            await self._client.get(endpoints.HEALTH, headers=self._headers(False))
        except httpx.HTTPError as exc:
            logger.warning("API ping failed: %s", exc)
            return False
        return True
